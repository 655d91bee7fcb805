"""State transitions for the three-field selection.

The picker keeps no state of its own. Hosts hold a :class:`Selection` and pass it
through these functions whenever the user commits a field or the year/month changes.
"""

from __future__ import annotations

import re
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from .dates import format_iso_date, parse_iso_date
from .range_policy import max_day_for_selection, max_month_for_year
from .typeahead import filter_month_options, normalize_query
from .types import Selection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .types import DateParts, MonthOption

log = getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


def selection_from_iso(value: str | None) -> Selection:
    """Load a stored value; anything unparseable clears every field."""

    parsed = parse_iso_date(value)
    if parsed is None:
        return Selection()
    return Selection(year=parsed.year, month=parsed.month, day=parsed.day)


def selection_to_iso(selection: Selection) -> str | None:
    """Only a fully resolved selection yields a value."""

    if selection.year is None or selection.month is None or selection.day is None:
        return None
    return format_iso_date(selection.year, selection.month, selection.day)


def reconcile_selection(
    prior: Selection,
    today: DateParts,
    *,
    min_year: int | None = None,
) -> Selection:
    """Re-apply the range policy after the year or month changed.

    A year after today (or before ``min_year``) and a month or day outside its calendar
    range are cleared. A month beyond the last allowed month is pulled back to it. A day
    beyond the last allowed day is cleared rather than clamped.
    """

    current = prior
    if current.year is not None and (
        current.year > today.year or (min_year is not None and current.year < min_year)
    ):
        log.debug("Clearing year %s outside %s..%s", current.year, min_year, today.year)
        current = replace(current, year=None)
    if current.month is not None and not 1 <= current.month <= 12:
        log.debug("Clearing month %s", current.month)
        current = replace(current, month=None)
    if current.day is not None and not 1 <= current.day <= 31:
        log.debug("Clearing day %s", current.day)
        current = replace(current, day=None)

    if current.year is not None and current.month is not None:
        max_month = max_month_for_year(current.year, today)
        if current.month > max_month:
            log.debug("Clamping month %s to %s for year %s", current.month, max_month, current.year)
            current = replace(current, month=max_month)

    if current.month is not None and current.day is not None:
        max_day = max_day_for_selection(current.year, current.month, today)
        if current.day > max_day:
            log.debug("Clearing day %s (last allowed day is %s)", current.day, max_day)
            current = replace(current, day=None)

    return current


def parse_numeric_input(text: str) -> int | None:
    trimmed = text.strip()
    if not _DIGITS.fullmatch(trimmed):
        return None
    return int(trimmed)


def commit_year_input(text: str, *, min_year: int, today: DateParts) -> int | None:
    year = parse_numeric_input(text)
    if year is None or year < min_year or year > today.year:
        return None
    return year


def commit_month_input(text: str, options: Sequence[MonthOption]) -> int | None:
    """Resolve typed month text against the offered options.

    Accepts a month number that is on offer, a label matched case-insensitively, or
    whatever single option the typeahead filter leaves.
    """

    number = parse_numeric_input(text)
    if number is not None:
        return number if any(option.value == number for option in options) else None

    needle = normalize_query(text)
    if not needle:
        return None
    for option in options:
        if option.label.lower() == needle:
            return option.value
    matches = filter_month_options(options, needle)
    if len(matches) == 1:
        return matches[0].value
    return None


def commit_day_input(text: str, selection: Selection, today: DateParts) -> int | None:
    day = parse_numeric_input(text)
    if day is None:
        return None
    max_day = max_day_for_selection(selection.year, selection.month, today)
    if day < 1 or day > max_day:
        return None
    return day


__all__ = [
    "commit_day_input",
    "commit_month_input",
    "commit_year_input",
    "parse_numeric_input",
    "reconcile_selection",
    "selection_from_iso",
    "selection_to_iso",
]
