"""Upper bounds for month and day choices under the "no future dates" rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .dates import days_in_month
from .types import FALLBACK_YEAR

if TYPE_CHECKING:
    from .types import DateParts


def max_month_for_year(selected_year: int | None, today: DateParts) -> int:
    """Months after today's month are off limits in the current year only."""

    if selected_year is None:
        return 12
    return today.month if selected_year == today.year else 12


def max_day_for_selection(
    selected_year: int | None,
    selected_month: int | None,
    today: DateParts,
) -> int:
    """Return the last selectable day for the current year/month selection.

    Without a month there is nothing to derive yet, so all 31 days remain open. Without
    a year the month length is taken from :data:`FALLBACK_YEAR` (non-leap), so February
    offers 28 days until a leap year is picked.
    """

    if selected_month is None:
        return 31
    year = selected_year if selected_year is not None else FALLBACK_YEAR
    max_by_month = days_in_month(year, selected_month)
    if (year, selected_month) == (today.year, today.month):
        return min(today.day, max_by_month)
    return max_by_month


__all__ = ["max_day_for_selection", "max_month_for_year"]
