"""
Domain services.

These services own the application collection and the workflows around it
while depending only on domain models and ports so that infrastructure and
UI layers can remain thin.
"""

from .application_store import ApplicationStore
from .deletion import DeletionConfirmationFlow
from .filter_view import ALL, FilterView, StatusFilter, parse_status_filter, project

__all__ = [
    "ApplicationStore",
    "DeletionConfirmationFlow",
    "FilterView",
    "StatusFilter",
    "ALL",
    "parse_status_filter",
    "project",
]
