from __future__ import annotations

import pytest

from birthpick.domain.types import DateParts

ENGLISH_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class FakeMonthNameFormatter:
    """Formats months as ``<locale>:<month>`` and records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, str]] = []

    def format_month(self, month: int, locale: str) -> str:
        self.calls.append((month, locale))
        return f"{locale}:{month}"


@pytest.fixture
def today() -> DateParts:
    return DateParts(year=2024, month=6, day=10)


@pytest.fixture
def month_names() -> list[str]:
    return list(ENGLISH_MONTHS)


@pytest.fixture
def fake_formatter() -> FakeMonthNameFormatter:
    return FakeMonthNameFormatter()
