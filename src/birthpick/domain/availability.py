"""Narrow option lists to what the current selection allows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .range_policy import max_day_for_selection, max_month_for_year

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .types import DateParts, MonthOption


def available_months(
    options: Sequence[MonthOption],
    selected_year: int | None,
    today: DateParts,
) -> list[MonthOption]:
    max_month = max_month_for_year(selected_year, today)
    return [option for option in options if option.value <= max_month]


def available_days(
    selected_year: int | None,
    selected_month: int | None,
    today: DateParts,
) -> list[int]:
    """Days 1..N for the selection; all 31 while no month has been chosen.

    The full range is a placeholder in that state; day selection should stay disabled
    until a month is picked.
    """

    if selected_month is None:
        return list(range(1, 32))
    max_day = max_day_for_selection(selected_year, selected_month, today)
    return list(range(1, max_day + 1))


__all__ = ["available_days", "available_months"]
