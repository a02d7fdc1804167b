"""Infrastructure adapters – concrete implementations of domain ports."""

from .config import FileSystemConfigProvider
from .interaction import ConsoleConfirmation
from .persistence import (
    ApplicationPersistence,
    JsonFileKeyValueStorage,
    SQLiteKeyValueStorage,
)
from .runtime import StructuredLogger, SystemClock, TimestampIdGenerator

__all__ = [
    "FileSystemConfigProvider",
    "ConsoleConfirmation",
    "ApplicationPersistence",
    "JsonFileKeyValueStorage",
    "SQLiteKeyValueStorage",
    "SystemClock",
    "TimestampIdGenerator",
    "StructuredLogger",
]
