from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Any, Protocol, Sequence, runtime_checkable

from domain.models import JobApplication, TrackerConfig


@runtime_checkable
class KeyValueStoragePort(Protocol):
    """
    Durable string slots addressed by key.

    Implementations raise ``StorageError`` when the medium fails. A missing
    key is not a failure: ``get_item`` returns ``None``.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...


@runtime_checkable
class ApplicationPersistencePort(Protocol):
    """
    Load and save the whole application collection.

    Neither method raises: read failures yield an empty collection and
    write failures are logged and reported through the return value.
    """

    @abstractmethod
    def load(self) -> tuple[JobApplication, ...]:
        ...

    @abstractmethod
    def save(self, applications: Sequence[JobApplication]) -> bool:
        ...


@runtime_checkable
class ConfigProviderPort(Protocol):
    """Source of tracker configuration."""

    def get_config(self) -> TrackerConfig:
        ...

    def validate(self) -> list[str]:
        ...


@runtime_checkable
class ConfirmationPort(Protocol):
    """Ask the user a yes/no question before a destructive action."""

    def confirm(self, prompt: str) -> bool:
        ...


@runtime_checkable
class ClockPort(Protocol):
    """Time source for deterministic and easily testable code."""

    def now(self) -> datetime:
        ...


@runtime_checkable
class IdGeneratorPort(Protocol):
    """Generation of identifiers for new application records."""

    def new_application_id(self) -> str:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "KeyValueStoragePort",
    "ApplicationPersistencePort",
    "ConfigProviderPort",
    "ConfirmationPort",
    "ClockPort",
    "IdGeneratorPort",
    "LoggerPort",
]
