from __future__ import annotations

import pytest

from app import format_date


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-05", "Jan 5, 2024"),
        ("2023-12-31", "Dec 31, 2023"),
        ("", ""),
        ("next tuesday", "next tuesday"),
        ("2024-02-30", "2024-02-30"),
    ],
)
def test_format_date(value: str, expected: str) -> None:
    assert format_date(value) == expected
