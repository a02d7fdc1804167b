from __future__ import annotations

from datetime import datetime, timezone


class SystemClock:
    """Wall-clock time in UTC; seeds application identifiers."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
