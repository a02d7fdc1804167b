from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from app.formatting import format_date
from domain.models import ApplicationDraft, DeletionCandidate, JobApplication, JobStatus
from domain.ports import ApplicationPersistencePort
from domain.services import (
    ApplicationStore,
    DeletionConfirmationFlow,
    FilterView,
    StatusFilter,
)

EMPTY_MESSAGE = "Get started by adding your first application!"


@dataclass(frozen=True)
class ApplicationCard:
    id: str
    company: str
    title: str
    date_display: str
    status: str
    link: str
    notes: str


class TrackerFacade:
    """
    UI-facing facade: application list, status filter and delete dialog.
    """

    def __init__(
        self,
        *,
        store: ApplicationStore,
        persistence: ApplicationPersistencePort,
    ) -> None:
        self._store = store
        self._persistence = persistence
        self._filter = FilterView(store)
        self._deletion = DeletionConfirmationFlow(store)

    @property
    def store(self) -> ApplicationStore:
        return self._store

    def start(self) -> None:
        if not self._store.is_ready:
            self._store.hydrate(self._persistence.load())

    def submit(self, draft: ApplicationDraft) -> JobApplication:
        return self._store.add(draft)

    def change_status(self, application_id: str, status: JobStatus | str) -> JobApplication | None:
        return self._store.set_status(application_id, status)

    def select_filter(self, value: StatusFilter | str) -> StatusFilter:
        return self._filter.select(value)

    @property
    def selected_filter(self) -> StatusFilter:
        return self._filter.selected

    def visible_applications(self) -> Sequence[JobApplication]:
        return self._filter.items()

    def visible_cards(self) -> Sequence[ApplicationCard]:
        return [self._to_card(a) for a in self._filter.items()]

    @property
    def empty_message(self) -> str | None:
        return EMPTY_MESSAGE if not self._filter.items() else None

    def request_delete(self, application_id: str) -> DeletionCandidate:
        return self._deletion.request(application_id)

    def delete_prompt(self) -> str | None:
        return self._deletion.prompt()

    def confirm_delete(self) -> bool:
        return self._deletion.confirm()

    def cancel_delete(self) -> None:
        self._deletion.cancel()

    @staticmethod
    def _to_card(application: JobApplication) -> ApplicationCard:
        return ApplicationCard(
            id=application.id,
            company=application.company,
            title=application.title,
            date_display=format_date(application.date),
            status=application.status.value,
            link=application.link,
            notes=application.notes,
        )
