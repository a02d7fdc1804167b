from __future__ import annotations

from datetime import date


def format_date(value: str) -> str:
    """
    Render an ISO calendar date as ``Jan 5, 2024``.

    The month abbreviation follows the active locale. Values that are not
    valid dates are returned unchanged.
    """
    if not value:
        return ""
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"
