from __future__ import annotations

from typing import Sequence

from domain.errors import StorageError, StorageReadError, StorageWriteError
from domain.models import JobApplication
from domain.ports import KeyValueStoragePort, LoggerPort

from ._codec import decode_applications, encode_applications

DEFAULT_STORAGE_KEY = "jobApplications"


class ApplicationPersistence:
    """
    Implementation of ``ApplicationPersistencePort`` over a single storage key.

    The whole collection is stored as one JSON array under ``key``. Storage
    and parsing failures are logged and never reach the caller: a failed
    load reads as an empty collection and a failed save leaves the
    in-memory collection authoritative for the session.
    """

    def __init__(
        self,
        storage: KeyValueStoragePort,
        logger: LoggerPort,
        key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._logger = logger
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> tuple[JobApplication, ...]:
        try:
            raw = self._storage.get_item(self._key)
            if raw is None:
                return ()
            return decode_applications(raw)
        except StorageError as exc:
            error = exc if isinstance(exc, StorageReadError) else StorageReadError(str(exc))
            self._logger.error(
                "Failed to load applications from storage",
                key=self._key,
                error_type=type(error).__name__,
                reason=str(error),
            )
            return ()

    def save(self, applications: Sequence[JobApplication]) -> bool:
        payload = encode_applications(applications)
        try:
            self._storage.set_item(self._key, payload)
        except StorageError as exc:
            error = StorageWriteError(str(exc))
            self._logger.error(
                "Failed to save applications to storage",
                key=self._key,
                error_type=type(error).__name__,
                reason=str(error),
                count=len(applications),
            )
            return False
        return True
