from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from domain.errors import ApplicationValidationError, StoreStateError
from domain.models import ApplicationDraft, JobApplication, JobStatus, StorePhase
from domain.ports import ApplicationPersistencePort, IdGeneratorPort, LoggerPort

_REQUIRED_FIELDS = ("company", "title", "date")
_DRAFT_FIELDS = (*_REQUIRED_FIELDS, "link", "notes")


class ApplicationStore:
    """
    Authoritative in-memory collection of job applications.

    The collection is ordered newest first. Every completed mutation is
    written through to the persistence port before the call returns; the
    outcome of that write never changes what the caller sees.

    The store starts ``UNINITIALIZED`` and only accepts mutations after
    ``hydrate`` has run once.
    """

    def __init__(
        self,
        *,
        persistence: ApplicationPersistencePort,
        id_generator: IdGeneratorPort,
        logger: LoggerPort,
    ) -> None:
        self._persistence = persistence
        self._id_generator = id_generator
        self._logger = logger
        self._applications: list[JobApplication] = []
        self._phase = StorePhase.UNINITIALIZED

    @property
    def phase(self) -> StorePhase:
        return self._phase

    @property
    def is_ready(self) -> bool:
        return self._phase is StorePhase.READY

    def hydrate(self, initial: Sequence[JobApplication]) -> None:
        """
        Replace the collection with previously stored records.

        Runs once at startup and does not write back to storage.
        """
        if self._phase is StorePhase.READY:
            raise StoreStateError("Application store is already hydrated")

        seen: set[str] = set()
        applications: list[JobApplication] = []
        for application in initial:
            if application.id in seen:
                self._logger.warning(
                    "Dropping duplicate application during hydration",
                    application_id=application.id,
                )
                continue
            seen.add(application.id)
            applications.append(application)

        self._applications = applications
        self._phase = StorePhase.READY
        self._logger.info("Application store hydrated", count=len(applications))

    def list(self) -> tuple[JobApplication, ...]:
        return tuple(self._applications)

    def get(self, application_id: str) -> JobApplication | None:
        for application in self._applications:
            if application.id == application_id:
                return application
        return None

    def add(self, draft: ApplicationDraft) -> JobApplication:
        self._ensure_ready("add")
        values: dict[str, str] = {}
        for name in _DRAFT_FIELDS:
            raw = getattr(draft, name)
            if raw is None:
                raw = ""
            if not isinstance(raw, str):
                raise ApplicationValidationError(
                    f"Field {name} must be text, got {type(raw).__name__}",
                )
            values[name] = raw.strip()
        missing = [name for name in _REQUIRED_FIELDS if not values[name]]
        if missing:
            raise ApplicationValidationError(
                f"Missing required fields: {', '.join(missing)}",
                missing_fields=missing,
            )

        application = JobApplication(
            id=self._next_id(),
            status=JobStatus.APPLIED,
            **values,
        )
        self._applications.insert(0, application)
        self._logger.info(
            "Application added",
            application_id=application.id,
            company=application.company,
        )
        self._persist()
        return application

    def set_status(
        self,
        application_id: str,
        status: JobStatus | str,
    ) -> JobApplication | None:
        self._ensure_ready("set_status")
        new_status = _coerce_status(status)
        for index, application in enumerate(self._applications):
            if application.id == application_id:
                updated = replace(application, status=new_status)
                self._applications[index] = updated
                self._logger.info(
                    "Application status changed",
                    application_id=application_id,
                    status=new_status.value,
                )
                self._persist()
                return updated
        return None

    def remove(self, application_id: str) -> bool:
        self._ensure_ready("remove")
        remaining = [a for a in self._applications if a.id != application_id]
        if len(remaining) == len(self._applications):
            return False
        self._applications = remaining
        self._logger.info("Application removed", application_id=application_id)
        self._persist()
        return True

    # -- helpers ------------------------------------------------------------

    def _ensure_ready(self, operation: str) -> None:
        if self._phase is not StorePhase.READY:
            raise StoreStateError(
                f"Cannot {operation} before the application store is hydrated",
            )

    def _next_id(self) -> str:
        existing = {a.id for a in self._applications}
        new_id = self._id_generator.new_application_id()
        while new_id in existing:
            new_id = self._id_generator.new_application_id()
        return new_id

    def _persist(self) -> None:
        self._persistence.save(tuple(self._applications))


def _coerce_status(status: JobStatus | str) -> JobStatus:
    try:
        return JobStatus(status)
    except ValueError:
        raise ApplicationValidationError(f"Unknown status: {status!r}") from None
