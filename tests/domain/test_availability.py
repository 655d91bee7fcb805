from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from birthpick.domain.availability import available_days, available_months
from birthpick.domain.options import build_month_options

if TYPE_CHECKING:
    from birthpick.domain.types import DateParts, MonthOption
    from tests.conftest import FakeMonthNameFormatter


@pytest.fixture
def all_months(month_names: list[str], fake_formatter: FakeMonthNameFormatter) -> list[MonthOption]:
    return build_month_options("en-AU", month_names, formatter=fake_formatter)


def test_current_year_restricts_months(all_months: list[MonthOption], today: DateParts) -> None:
    restricted = available_months(all_months, 2024, today)
    unrestricted = available_months(all_months, 2023, today)

    assert restricted[-1].value == 6
    assert [option.label for option in restricted] == [
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
    ]
    assert unrestricted[-1].value == 12
    assert available_months(all_months, None, today) == all_months


def test_available_months_preserves_input_order(
    all_months: list[MonthOption],
    today: DateParts,
) -> None:
    shuffled = list(reversed(all_months))

    result = available_months(shuffled, 2024, today)

    assert [option.value for option in result] == [6, 5, 4, 3, 2, 1]


def test_current_month_restricts_days(today: DateParts) -> None:
    assert available_days(2024, 6, today)[-1] == 10
    assert available_days(2024, 5, today)[-1] == 31
    assert available_days(2024, 2, today) == list(range(1, 30))


def test_days_without_month_span_full_range(today: DateParts) -> None:
    assert available_days(None, None, today) == list(range(1, 32))
    assert available_days(2024, None, today) == list(range(1, 32))


def test_days_without_year_use_non_leap_february(today: DateParts) -> None:
    assert available_days(None, 2, today)[-1] == 28
