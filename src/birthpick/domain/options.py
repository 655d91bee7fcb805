"""Candidate year and month lists for the picker."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import MonthOption

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .ports import MonthNameFormatter


def build_year_options(min_year: int, max_year: int) -> list[int]:
    """Return years from the larger bound down to the smaller one, inclusive.

    Swapped bounds still produce a descending list rather than an empty one.
    """

    upper = max(min_year, max_year)
    lower = min(min_year, max_year)
    return list(range(upper, lower - 1, -1))


def build_month_options(
    locale: str,
    month_names: Sequence[str] | None = None,
    *,
    formatter: MonthNameFormatter,
) -> list[MonthOption]:
    """Build the twelve month options.

    Host-supplied ``month_names`` are used only when there are at least twelve of them;
    blank entries are replaced by the formatter's name for that month. Fewer than twelve
    names are ignored and every label comes from the formatter.
    """

    if month_names is not None and len(month_names) >= 12:
        labels = [
            name if name and name.strip() else formatter.format_month(index, locale)
            for index, name in enumerate(month_names[:12], start=1)
        ]
    else:
        labels = [formatter.format_month(month, locale) for month in range(1, 13)]

    return [MonthOption(value=index, label=label) for index, label in enumerate(labels, start=1)]


def month_label_map(options: Iterable[MonthOption]) -> dict[int, str]:
    return {option.value: option.label for option in options}


def month_label(options: Iterable[MonthOption], month: int | None) -> str | None:
    """Label shown for a chosen month, or its number when no option carries it."""

    if month is None:
        return None
    return month_label_map(options).get(month, str(month))


__all__ = ["build_month_options", "build_year_options", "month_label", "month_label_map"]
