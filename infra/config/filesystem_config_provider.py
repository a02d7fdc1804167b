from __future__ import annotations

import json
from pathlib import Path

from domain.models import TrackerConfig
from infra.persistence.json_file_storage import SAFE_KEY_PATTERN

_BACKENDS = {"json", "sqlite"}
_LOG_LEVELS = {"info", "warning", "error"}
_DEFAULT_PATHS = {"json": "./data", "sqlite": "./job_tracker.db"}


class FileSystemConfigProvider:
    """Reads config.json from a config directory.

    Every public method re-reads from disk so that edits
    to the JSON file take effect without restarting the app.
    A missing config.json means "use the defaults".
    """

    def __init__(self, config_dir: str) -> None:
        self._config_dir = Path(config_dir)

    @property
    def config_path(self) -> Path:
        return self._config_dir / "config.json"

    def validate(self) -> list[str]:
        errors: list[str] = []
        path = self.config_path
        if not path.is_file():
            return errors
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            errors.append(f"Cannot read {path}: {exc}")
            return errors
        if not isinstance(data, dict):
            errors.append(f"{path.name} must contain a JSON object.")
            return errors

        backend = data.get("storage_backend", "json")
        if backend not in _BACKENDS:
            errors.append(
                f"storage_backend must be one of {', '.join(sorted(_BACKENDS))}, got '{backend}'.",
            )

        storage_path = data.get("storage_path")
        if storage_path is not None and (not isinstance(storage_path, str) or not storage_path.strip()):
            errors.append("storage_path must be a non-empty string.")

        key = data.get("storage_key", "jobApplications")
        if not isinstance(key, str) or not key.strip():
            errors.append("storage_key must be a non-empty string.")
        elif backend == "json" and not SAFE_KEY_PATTERN.match(key):
            errors.append(
                "storage_key may only contain letters, digits, '.', '_' and '-' "
                "with the json backend.",
            )

        log_level = data.get("log_level", "warning")
        if log_level not in _LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}, got '{log_level}'.",
            )
        return errors

    def get_config(self) -> TrackerConfig:
        data = self._read_json()
        backend = data.get("storage_backend", "json")
        return TrackerConfig(
            storage_backend=backend,
            storage_path=data.get("storage_path") or _DEFAULT_PATHS.get(backend, "./data"),
            storage_key=data.get("storage_key", "jobApplications"),
            log_level=data.get("log_level", "warning"),
        )

    # -- internal helpers ---------------------------------------------------

    def _read_json(self) -> dict:
        path = self.config_path
        if not path.is_file():
            return {}
        return json.loads(path.read_text(encoding="utf-8"))
