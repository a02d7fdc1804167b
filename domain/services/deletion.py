from __future__ import annotations

from domain.models import DeletionCandidate
from domain.services.application_store import ApplicationStore

_PLACEHOLDER_LABEL = "this application"


class DeletionConfirmationFlow:
    """
    Two-step guard around removing an application.

    ``request`` selects a candidate, then ``confirm`` removes it or
    ``cancel`` drops it. At most one candidate is pending; a new request
    replaces the previous one.
    """

    def __init__(self, store: ApplicationStore) -> None:
        self._store = store
        self._pending: DeletionCandidate | None = None

    @property
    def pending(self) -> DeletionCandidate | None:
        return self._pending

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    def request(self, application_id: str) -> DeletionCandidate:
        application = self._store.get(application_id)
        label = application.company if application is not None else ""
        self._pending = DeletionCandidate(application_id=application_id, label=label)
        return self._pending

    def confirm(self) -> bool:
        """Remove the pending candidate. Returns whether a record was removed."""
        if self._pending is None:
            return False
        candidate = self._pending
        self._pending = None
        return self._store.remove(candidate.application_id)

    def cancel(self) -> None:
        self._pending = None

    def prompt(self) -> str | None:
        if self._pending is None:
            return None
        label = self._pending.label or _PLACEHOLDER_LABEL
        return f"Are you sure you want to delete {label}? This action cannot be undone."
