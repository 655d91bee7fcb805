"""Value types shared by the picker's calendar, range and option logic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_MIN_YEAR: Final[int] = 1901
DEFAULT_LOCALE: Final[str] = "en-AU"

# Non-leap year used for day counts while the year is still unset.
FALLBACK_YEAR: Final[int] = 2001


@dataclass(frozen=True, slots=True)
class DateParts:
    """A year/month/day triplet, either a calendar date or a "today" reference.

    No calendar validity is checked on construction; callers supply consistent values.
    """

    year: int
    month: int
    day: int


@dataclass(frozen=True, slots=True)
class MonthOption:
    """Selectable month: its number (1-12) and display label."""

    value: int
    label: str


@dataclass(frozen=True, slots=True)
class Selection:
    """Year/month/day chosen so far; ``None`` means "not chosen yet"."""

    year: int | None = None
    month: int | None = None
    day: int | None = None


__all__ = [
    "DEFAULT_LOCALE",
    "DEFAULT_MIN_YEAR",
    "FALLBACK_YEAR",
    "DateParts",
    "MonthOption",
    "Selection",
]
