"""Everything a three-field picker needs to draw itself for one selection state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .availability import available_days, available_months
from .options import build_month_options, build_year_options, month_label
from .selection import reconcile_selection, selection_to_iso
from .typeahead import filter_month_options, filter_number_options, filter_year_options
from .types import DEFAULT_LOCALE, DEFAULT_MIN_YEAR, Selection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .ports import MonthNameFormatter
    from .types import DateParts, MonthOption


@dataclass(frozen=True, slots=True)
class PickerRequest:
    """Inputs for one evaluation of the picker."""

    today: DateParts
    min_year: int = DEFAULT_MIN_YEAR
    locale: str = DEFAULT_LOCALE
    month_names: Sequence[str] | None = None
    selection: Selection = field(default_factory=Selection)
    year_query: str = ""
    month_query: str = ""
    day_query: str = ""


@dataclass(frozen=True, slots=True)
class PickerView:
    selection: Selection
    years: list[int]
    months: list[MonthOption]
    days: list[int]
    day_enabled: bool
    month_label: str | None
    value: str | None


def build_picker_view(request: PickerRequest, *, formatter: MonthNameFormatter) -> PickerView:
    """Reconcile the selection, then build, narrow and filter each option list.

    Day selection is only enabled once a month is chosen; until then ``days`` is the
    unconstrained 1..31 placeholder.
    """

    today = request.today
    selection = reconcile_selection(request.selection, today, min_year=request.min_year)

    all_months = build_month_options(request.locale, request.month_names, formatter=formatter)
    years = build_year_options(request.min_year, today.year)
    months = available_months(all_months, selection.year, today)
    days = available_days(selection.year, selection.month, today)

    return PickerView(
        selection=selection,
        years=filter_year_options(years, request.year_query),
        months=filter_month_options(months, request.month_query),
        days=filter_number_options(days, request.day_query),
        day_enabled=selection.month is not None,
        month_label=month_label(all_months, selection.month),
        value=selection_to_iso(selection),
    )


__all__ = ["PickerRequest", "PickerView", "build_picker_view"]
