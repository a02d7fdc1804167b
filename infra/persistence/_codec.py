from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Sequence

from domain.errors import StorageReadError
from domain.models import JobApplication, JobStatus

FIELDS = ("id", "company", "title", "date", "link", "notes", "status")


def encode_applications(applications: Sequence[JobApplication]) -> str:
    rows = []
    for application in applications:
        row = asdict(application)
        row["status"] = application.status.value
        rows.append({name: row[name] for name in FIELDS})
    return json.dumps(rows)


def decode_applications(raw: str) -> tuple[JobApplication, ...]:
    """Parse a stored collection, raising ``StorageReadError`` if malformed."""
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise StorageReadError(f"Stored value is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise StorageReadError(
            f"Stored value is a {type(data).__name__}, expected a list",
        )

    applications: list[JobApplication] = []
    seen: set[str] = set()
    for index, item in enumerate(data):
        application = _decode_row(index, item)
        if application.id in seen:
            raise StorageReadError(f"Duplicate id {application.id!r} at index {index}")
        seen.add(application.id)
        applications.append(application)
    return tuple(applications)


def _decode_row(index: int, item: Any) -> JobApplication:
    if not isinstance(item, dict):
        raise StorageReadError(f"Record {index} is not an object")
    missing = [name for name in FIELDS if name not in item]
    if missing:
        raise StorageReadError(f"Record {index} missing fields: {', '.join(missing)}")
    not_text = [name for name in FIELDS if not isinstance(item[name], str)]
    if not_text:
        raise StorageReadError(f"Record {index} has non-text fields: {', '.join(not_text)}")
    try:
        status = JobStatus(item["status"])
    except ValueError:
        raise StorageReadError(
            f"Record {index} has unknown status {item['status']!r}",
        ) from None
    return JobApplication(
        id=item["id"],
        company=item["company"],
        title=item["title"],
        date=item["date"],
        link=item["link"],
        notes=item["notes"],
        status=status,
    )
