from __future__ import annotations

from typing import Literal, Sequence, Union

from domain.models import JobApplication, JobStatus
from domain.services.application_store import ApplicationStore

ALL: Literal["All"] = "All"

StatusFilter = Union[Literal["All"], JobStatus]


def parse_status_filter(value: str) -> StatusFilter:
    """Turn ``"All"`` or a status literal (any case) into a filter value."""
    normalized = value.strip().lower()
    if normalized == ALL.lower():
        return ALL
    for status in JobStatus:
        if status.value.lower() == normalized:
            return status
    raise ValueError(f"Unknown status filter: {value!r}")


def project(
    applications: Sequence[JobApplication],
    status_filter: StatusFilter,
) -> tuple[JobApplication, ...]:
    if status_filter == ALL:
        return tuple(applications)
    return tuple(a for a in applications if a.status == status_filter)


class FilterView:
    """Currently selected status filter over a store, recomputed on every read."""

    def __init__(self, store: ApplicationStore) -> None:
        self._store = store
        self._selected: StatusFilter = ALL

    @property
    def selected(self) -> StatusFilter:
        return self._selected

    def select(self, status_filter: StatusFilter | str) -> StatusFilter:
        if isinstance(status_filter, JobStatus):
            self._selected = status_filter
        else:
            self._selected = parse_status_filter(status_filter)
        return self._selected

    def items(self) -> tuple[JobApplication, ...]:
        return project(self._store.list(), self._selected)
