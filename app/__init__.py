"""Application/UI layer package."""

from .facade import EMPTY_MESSAGE, ApplicationCard, TrackerFacade
from .formatting import format_date

__all__ = ["ApplicationCard", "EMPTY_MESSAGE", "TrackerFacade", "format_date"]
