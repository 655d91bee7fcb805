"""Picker defaults supplied by the host environment."""

from __future__ import annotations

import math
from dataclasses import dataclass

from birthpick.domain.types import DEFAULT_LOCALE, DEFAULT_MIN_YEAR, DateParts

from .env import optional_env_var, optional_int_env_var

MIN_YEAR_ENV = "BIRTHPICK_MIN_YEAR"
LOCALE_ENV = "BIRTHPICK_LOCALE"


@dataclass(frozen=True, slots=True)
class PickerConfig:
    min_year: int = DEFAULT_MIN_YEAR
    locale: str = DEFAULT_LOCALE


def get_picker_config() -> PickerConfig:
    min_year = optional_int_env_var(MIN_YEAR_ENV)
    locale = optional_env_var(LOCALE_ENV)
    return PickerConfig(
        min_year=DEFAULT_MIN_YEAR if min_year is None else min_year,
        locale=locale or DEFAULT_LOCALE,
    )


def resolve_min_year(raw: float | None, today: DateParts) -> int:
    """Turn a host-provided minimum year into one the picker can offer.

    Missing or NaN values use :data:`DEFAULT_MIN_YEAR`; fractions are truncated; the
    result is kept within ``[DEFAULT_MIN_YEAR, today.year]``.
    """

    if raw is None or math.isnan(raw):
        parsed = DEFAULT_MIN_YEAR
    elif math.isinf(raw):
        parsed = today.year if raw > 0 else DEFAULT_MIN_YEAR
    else:
        parsed = math.trunc(raw)
    return min(max(parsed, DEFAULT_MIN_YEAR), today.year)


def resolve_locale(raw: str | None) -> str:
    if raw is None or not raw.strip():
        return DEFAULT_LOCALE
    return raw


__all__ = [
    "LOCALE_ENV",
    "MIN_YEAR_ENV",
    "PickerConfig",
    "get_picker_config",
    "resolve_locale",
    "resolve_min_year",
]
