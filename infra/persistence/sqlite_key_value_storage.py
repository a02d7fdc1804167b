from __future__ import annotations

import sqlite3

from domain.errors import StorageError


class SQLiteKeyValueStorage:
    """
    SQLite-backed implementation of ``KeyValueStoragePort``.

    One row per key; ``set_item`` replaces the row in a single statement.
    The database is opened on first use, so an unreadable or corrupt file
    surfaces as ``StorageError`` from the item methods.
    """

    _SCHEMA_SQL = """\
    CREATE TABLE IF NOT EXISTS kv_store (
        key   TEXT PRIMARY KEY,
        value TEXT NOT NULL
    );
    """

    def __init__(self, db_path: str = ":memory:") -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._closed = False

    def __enter__(self) -> SQLiteKeyValueStorage:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def get_item(self, key: str) -> str | None:
        conn = self._connection()
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?",
                (key,),
            ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot read key {key!r}: {exc}") from exc
        if row is None:
            return None
        return str(row[0])

    def set_item(self, key: str, value: str) -> None:
        conn = self._connection()
        try:
            with conn:
                conn.execute(
                    "INSERT INTO kv_store (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot write key {key!r}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        conn = self._connection()
        try:
            with conn:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot remove key {key!r}: {exc}") from exc

    def close(self) -> None:
        self._closed = True
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _connection(self) -> sqlite3.Connection:
        if self._closed:
            raise StorageError(f"Storage {self._db_path} is closed")
        if self._conn is None:
            conn: sqlite3.Connection | None = None
            try:
                conn = sqlite3.connect(self._db_path)
                conn.execute("PRAGMA journal_mode=WAL")
                conn.executescript(self._SCHEMA_SQL)
            except sqlite3.Error as exc:
                if conn is not None:
                    conn.close()
                raise StorageError(f"Cannot open {self._db_path}: {exc}") from exc
            self._conn = conn
        return self._conn
