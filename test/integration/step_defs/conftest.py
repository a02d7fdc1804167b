"""Shared fixtures and context for BDD step definitions."""
from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from app import TrackerFacade
from domain.errors import ApplicationValidationError
from domain.models import JobApplication
from domain.ports import KeyValueStoragePort
from domain.services import ApplicationStore
from infra.persistence import ApplicationPersistence
from test.mocks import InMemoryKeyValueStorage, InMemoryLogger, SequentialIdGenerator


@dataclass
class TrackerContext:
    """Holds mutable state shared across BDD steps."""

    storage: KeyValueStoragePort = field(default_factory=InMemoryKeyValueStorage)
    logger: InMemoryLogger = field(default_factory=InMemoryLogger)
    ids: SequentialIdGenerator = field(default_factory=SequentialIdGenerator)
    facade: TrackerFacade | None = None
    error: ApplicationValidationError | None = None

    def start(self) -> TrackerFacade:
        """Open a fresh session over the current storage, as a page reload would."""
        persistence = ApplicationPersistence(self.storage, self.logger)
        store = ApplicationStore(
            persistence=persistence,
            id_generator=self.ids,
            logger=self.logger,
        )
        self.facade = TrackerFacade(store=store, persistence=persistence)
        self.facade.start()
        return self.facade

    @property
    def tracker(self) -> TrackerFacade:
        assert self.facade is not None, "tracker was not started"
        return self.facade

    def find(self, company: str) -> JobApplication:
        for application in self.tracker.store.list():
            if application.company == company:
                return application
        raise AssertionError(f"No application for {company!r}")


@pytest.fixture()
def ctx() -> TrackerContext:
    return TrackerContext()
