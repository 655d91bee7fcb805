from __future__ import annotations

from birthpick.domain.range_policy import max_day_for_selection, max_month_for_year
from birthpick.domain.types import FALLBACK_YEAR, DateParts


def test_max_month_for_year(today: DateParts) -> None:
    assert max_month_for_year(2024, today) == 6
    assert max_month_for_year(2023, today) == 12
    assert max_month_for_year(None, today) == 12


def test_max_day_for_selection(today: DateParts) -> None:
    assert max_day_for_selection(2024, 6, today) == 10
    assert max_day_for_selection(2024, 2, today) == 29
    assert max_day_for_selection(2023, 2, today) == 28
    assert max_day_for_selection(2023, 6, today) == 30


def test_max_day_without_month_is_unconstrained(today: DateParts) -> None:
    assert max_day_for_selection(None, None, today) == 31
    assert max_day_for_selection(2024, None, today) == 31


def test_max_day_without_year_uses_non_leap_fallback(today: DateParts) -> None:
    assert max_day_for_selection(None, 2, today) == 28
    assert max_day_for_selection(None, 6, today) == 30
    assert max_day_for_selection(None, 1, today) == 31


def test_max_day_is_clamped_only_in_the_current_month() -> None:
    today = DateParts(year=2024, month=2, day=29)
    assert max_day_for_selection(2024, 2, today) == 29
    assert max_day_for_selection(2024, 1, today) == 31

    early = DateParts(year=2024, month=3, day=1)
    assert max_day_for_selection(2024, 3, early) == 1


def test_max_day_clamps_when_fallback_year_is_today() -> None:
    today = DateParts(year=FALLBACK_YEAR, month=2, day=14)
    assert max_day_for_selection(None, 2, today) == 14
