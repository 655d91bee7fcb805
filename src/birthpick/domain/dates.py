"""Calendar arithmetic and the ``YYYY-MM-DD`` wire format."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .types import DateParts

if TYPE_CHECKING:
    from datetime import date

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule, valid for any integer year."""

    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``.

    Months outside 1-12 are not rejected; they fall through to 31.
    """

    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def format_iso_date(year: int, month: int, day: int) -> str:
    """Zero-pad to ``YYYY-MM-DD``; the parts are not checked against the calendar."""

    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_iso_date(value: str | None) -> DateParts | None:
    """Parse a strict ``YYYY-MM-DD`` string.

    Only the shape and the coarse ranges (non-zero year, month 1-12, day 1-31) are
    checked. A day that does not exist in its month, such as ``2023-02-30``, is
    accepted here and left to the range policy.
    """

    if not value:
        return None
    match = _ISO_DATE.fullmatch(value)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    if year == 0 or not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    return DateParts(year=year, month=month, day=day)


def date_to_iso(value: date | None) -> str | None:
    if value is None:
        return None
    return format_iso_date(value.year, value.month, value.day)


def today_parts(value: date) -> DateParts:
    """Project a host-supplied ``date`` onto ``DateParts``."""

    return DateParts(year=value.year, month=value.month, day=value.day)


__all__ = [
    "date_to_iso",
    "days_in_month",
    "format_iso_date",
    "is_leap_year",
    "parse_iso_date",
    "today_parts",
]
