"""Calendar, range and option logic behind the three-field date picker.

Everything here is pure: callers pass ``today`` and the current selection in, and
nothing reads a clock or keeps state between calls.
"""

from __future__ import annotations

from .availability import available_days, available_months
from .dates import (
    date_to_iso,
    days_in_month,
    format_iso_date,
    is_leap_year,
    parse_iso_date,
    today_parts,
)
from .options import build_month_options, build_year_options, month_label, month_label_map
from .range_policy import max_day_for_selection, max_month_for_year
from .selection import (
    commit_day_input,
    commit_month_input,
    commit_year_input,
    parse_numeric_input,
    reconcile_selection,
    selection_from_iso,
    selection_to_iso,
)
from .typeahead import filter_month_options, filter_number_options, filter_year_options
from .view import PickerRequest, PickerView, build_picker_view
from .types import (
    DEFAULT_LOCALE,
    DEFAULT_MIN_YEAR,
    FALLBACK_YEAR,
    DateParts,
    MonthOption,
    Selection,
)

__all__ = [
    "DEFAULT_LOCALE",
    "DEFAULT_MIN_YEAR",
    "FALLBACK_YEAR",
    "DateParts",
    "MonthOption",
    "PickerRequest",
    "PickerView",
    "Selection",
    "available_days",
    "available_months",
    "build_month_options",
    "build_picker_view",
    "build_year_options",
    "commit_day_input",
    "commit_month_input",
    "commit_year_input",
    "date_to_iso",
    "days_in_month",
    "filter_month_options",
    "filter_number_options",
    "filter_year_options",
    "format_iso_date",
    "is_leap_year",
    "max_day_for_selection",
    "max_month_for_year",
    "month_label",
    "month_label_map",
    "parse_iso_date",
    "parse_numeric_input",
    "reconcile_selection",
    "selection_from_iso",
    "selection_to_iso",
    "today_parts",
]
