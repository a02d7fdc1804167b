from __future__ import annotations

from domain.models import ApplicationDraft, DeletionCandidate
from domain.services import ApplicationStore, DeletionConfirmationFlow
from test.mocks import InMemoryLogger, RecordingPersistence, SequentialIdGenerator


def _store_with(*companies: str) -> tuple[ApplicationStore, RecordingPersistence]:
    persistence = RecordingPersistence()
    store = ApplicationStore(
        persistence=persistence,
        id_generator=SequentialIdGenerator(),
        logger=InMemoryLogger(),
    )
    store.hydrate(())
    for company in companies:
        store.add(ApplicationDraft(company=company, title="Engineer", date="2024-01-05"))
    return store, persistence


def test_flow_starts_idle() -> None:
    store, _ = _store_with()
    flow = DeletionConfirmationFlow(store)
    assert flow.pending is None
    assert flow.is_pending is False
    assert flow.prompt() is None


def test_request_then_confirm_removes_only_candidate() -> None:
    store, _ = _store_with("Acme", "Globex", "Initech")
    flow = DeletionConfirmationFlow(store)

    candidate = flow.request("app-2")
    assert candidate == DeletionCandidate(application_id="app-2", label="Globex")

    assert flow.confirm() is True
    assert [a.id for a in store.list()] == ["app-3", "app-1"]
    assert flow.is_pending is False


def test_request_then_cancel_leaves_collection_unchanged() -> None:
    store, persistence = _store_with("Acme", "Globex")
    before = store.list()
    saves_before = len(persistence.saved)
    flow = DeletionConfirmationFlow(store)

    flow.request("app-1")
    flow.cancel()

    assert flow.pending is None
    assert store.list() == before
    assert len(persistence.saved) == saves_before


def test_request_for_unknown_id_uses_placeholder_label() -> None:
    store, _ = _store_with("Acme")
    flow = DeletionConfirmationFlow(store)

    candidate = flow.request("missing")

    assert candidate.label == ""
    assert flow.prompt() == (
        "Are you sure you want to delete this application? This action cannot be undone."
    )
    assert flow.confirm() is False
    assert len(store.list()) == 1


def test_prompt_names_company() -> None:
    store, _ = _store_with("Acme")
    flow = DeletionConfirmationFlow(store)
    flow.request("app-1")
    assert flow.prompt() == "Are you sure you want to delete Acme? This action cannot be undone."


def test_new_request_replaces_pending_candidate() -> None:
    store, _ = _store_with("Acme", "Globex")
    flow = DeletionConfirmationFlow(store)

    flow.request("app-1")
    flow.request("app-2")
    assert flow.pending is not None
    assert flow.pending.application_id == "app-2"

    flow.confirm()
    assert [a.id for a in store.list()] == ["app-1"]


def test_confirm_without_pending_is_noop() -> None:
    store, persistence = _store_with("Acme")
    saves_before = len(persistence.saved)
    flow = DeletionConfirmationFlow(store)

    assert flow.confirm() is False
    assert len(store.list()) == 1
    assert len(persistence.saved) == saves_before
