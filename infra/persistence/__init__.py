"""Persistence adapters for the application collection and its storage slot."""

from .application_persistence import DEFAULT_STORAGE_KEY, ApplicationPersistence
from .json_file_storage import JsonFileKeyValueStorage
from .sqlite_key_value_storage import SQLiteKeyValueStorage

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "ApplicationPersistence",
    "JsonFileKeyValueStorage",
    "SQLiteKeyValueStorage",
]
