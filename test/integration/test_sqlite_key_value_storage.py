from __future__ import annotations

import os

import pytest

from domain.errors import StorageError
from domain.models import JobApplication, JobStatus
from domain.ports import KeyValueStoragePort
from infra.persistence import ApplicationPersistence, SQLiteKeyValueStorage
from test.mocks import InMemoryLogger


@pytest.fixture()
def storage(tmp_path: str) -> SQLiteKeyValueStorage:
    db = os.path.join(tmp_path, "tracker.db")
    s = SQLiteKeyValueStorage(db_path=db)
    yield s
    s.close()


# -- protocol conformance --------------------------------------------------

def test_conforms_to_key_value_storage_port(storage: SQLiteKeyValueStorage) -> None:
    assert isinstance(storage, KeyValueStoragePort)


# -- get / set / remove -----------------------------------------------------

def test_get_missing_key_returns_none(storage: SQLiteKeyValueStorage) -> None:
    assert storage.get_item("jobApplications") is None


def test_set_and_get(storage: SQLiteKeyValueStorage) -> None:
    storage.set_item("jobApplications", "[]")
    assert storage.get_item("jobApplications") == "[]"


def test_set_overwrites_previous_value(storage: SQLiteKeyValueStorage) -> None:
    storage.set_item("jobApplications", "[1]")
    storage.set_item("jobApplications", "[2]")
    assert storage.get_item("jobApplications") == "[2]"


def test_keys_are_independent(storage: SQLiteKeyValueStorage) -> None:
    storage.set_item("a", "1")
    storage.set_item("b", "2")
    storage.remove_item("a")
    assert storage.get_item("a") is None
    assert storage.get_item("b") == "2"


def test_remove_missing_key_is_noop(storage: SQLiteKeyValueStorage) -> None:
    storage.remove_item("nothing-here")
    assert storage.get_item("nothing-here") is None


def test_closed_connection_raises_storage_error(tmp_path: str) -> None:
    s = SQLiteKeyValueStorage(db_path=os.path.join(tmp_path, "closed.db"))
    s.close()
    with pytest.raises(StorageError):
        s.get_item("jobApplications")
    with pytest.raises(StorageError):
        s.set_item("jobApplications", "[]")


# -- persistence across reopens --------------------------------------------

def test_data_persists_across_reopens(tmp_path: str) -> None:
    db = os.path.join(tmp_path, "persist.db")
    record = JobApplication(
        id="1704412800000",
        company="Acme",
        title="Engineer",
        date="2024-01-05",
        status=JobStatus.OFFER,
    )

    with SQLiteKeyValueStorage(db_path=db) as first:
        ApplicationPersistence(first, InMemoryLogger()).save((record,))

    with SQLiteKeyValueStorage(db_path=db) as second:
        assert ApplicationPersistence(second, InMemoryLogger()).load() == (record,)


def test_unopenable_path_raises_storage_error_on_use(tmp_path: str) -> None:
    s = SQLiteKeyValueStorage(db_path=os.path.join(tmp_path, "missing-dir", "x.db"))
    with pytest.raises(StorageError):
        s.get_item("jobApplications")
    s.close()


# -- corrupt database file --------------------------------------------------

def test_corrupt_database_raises_storage_error_on_use(tmp_path: str) -> None:
    db = os.path.join(tmp_path, "corrupt.db")
    with open(db, "wb") as handle:
        handle.write(b"this is not a sqlite database\n" * 100)

    with SQLiteKeyValueStorage(db_path=db) as s:
        with pytest.raises(StorageError):
            s.get_item("jobApplications")
        with pytest.raises(StorageError):
            s.set_item("jobApplications", "[]")


def test_corrupt_database_loads_as_empty_collection(tmp_path: str) -> None:
    db = os.path.join(tmp_path, "corrupt.db")
    with open(db, "wb") as handle:
        handle.write(b"this is not a sqlite database\n" * 100)
    logger = InMemoryLogger()

    with SQLiteKeyValueStorage(db_path=db) as s:
        persistence = ApplicationPersistence(s, logger)
        assert persistence.load() == ()
        assert persistence.save(()) is False

    assert logger.messages("error") == [
        "Failed to load applications from storage",
        "Failed to save applications to storage",
    ]
