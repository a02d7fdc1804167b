from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

from domain.errors import StorageError

SAFE_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileKeyValueStorage:
    """
    Filesystem implementation of ``KeyValueStoragePort``.

    Each key maps to ``<directory>/<key>.json``. Writes go to a temporary
    file in the same directory which then replaces the target, so readers
    see either the old value or the new one.
    """

    def __init__(self, directory: str) -> None:
        self._directory = Path(directory)

    def get_item(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._directory, prefix=f".{key}.", suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot remove {path}: {exc}") from exc

    def _path_for(self, key: str) -> Path:
        if not SAFE_KEY_PATTERN.match(key):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"
