"""Free-text narrowing of option lists for incremental search."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .types import MonthOption


def normalize_query(query: str) -> str:
    return query.strip().lower()


def filter_month_options(options: Sequence[MonthOption], query: str) -> list[MonthOption]:
    needle = normalize_query(query)
    if not needle:
        return list(options)
    return [option for option in options if needle in option.label.lower()]


def filter_number_options(options: Sequence[int], query: str) -> list[int]:
    needle = normalize_query(query)
    if not needle:
        return list(options)
    return [value for value in options if needle in str(value)]


def filter_year_options(options: Sequence[int], query: str) -> list[int]:
    """Keep years whose digits start with the query; years are typed left to right."""

    needle = normalize_query(query)
    if not needle:
        return list(options)
    return [value for value in options if str(value).startswith(needle)]


__all__ = [
    "filter_month_options",
    "filter_number_options",
    "filter_year_options",
    "normalize_query",
]
