"""
Domain layer package.

This package contains pure business logic models and ports that are
independent of any specific infrastructure or frameworks.
"""

from .errors import (  # noqa: F401
    ApplicationValidationError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    StoreStateError,
    TrackerError,
)
from .models import (  # noqa: F401
    ApplicationDraft,
    DeletionCandidate,
    JobApplication,
    JobStatus,
    StorePhase,
    TrackerConfig,
)
from .ports import (  # noqa: F401
    ApplicationPersistencePort,
    ClockPort,
    ConfigProviderPort,
    ConfirmationPort,
    IdGeneratorPort,
    KeyValueStoragePort,
    LoggerPort,
)

__all__ = [
    # Errors
    "TrackerError",
    "ApplicationValidationError",
    "StoreStateError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Models
    "JobStatus",
    "ApplicationDraft",
    "JobApplication",
    "DeletionCandidate",
    "StorePhase",
    "TrackerConfig",
    # Ports
    "KeyValueStoragePort",
    "ApplicationPersistencePort",
    "ConfigProviderPort",
    "ConfirmationPort",
    "ClockPort",
    "IdGeneratorPort",
    "LoggerPort",
]
