from __future__ import annotations

from typing import Sequence


class TrackerError(Exception):
    """Base class for errors raised by the tracker core."""


class ApplicationValidationError(TrackerError, ValueError):
    """Raised when a draft or status change fails validation.

    ``missing_fields`` lists the required draft fields that were empty
    after trimming; it is empty for an unknown status value.
    """

    def __init__(self, message: str, missing_fields: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.missing_fields = tuple(missing_fields)


class StoreStateError(TrackerError, RuntimeError):
    """Raised when the store is used outside of its lifecycle."""


class StorageError(TrackerError):
    """The durable storage medium failed or is unavailable."""


class StorageReadError(StorageError):
    """Stored data could not be read or is not a well-formed collection."""


class StorageWriteError(StorageError):
    """The collection could not be written to durable storage."""
