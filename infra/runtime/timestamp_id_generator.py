from __future__ import annotations

from domain.ports import ClockPort


class TimestampIdGenerator:
    """
    Millisecond-epoch identifiers, strictly increasing within a process.

    Two records created in the same millisecond get consecutive values.
    """

    def __init__(self, clock: ClockPort) -> None:
        self._clock = clock
        self._last = 0

    def new_application_id(self) -> str:
        candidate = int(self._clock.now().timestamp() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)
