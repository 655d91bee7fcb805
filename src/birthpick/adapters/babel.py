"""Month names from CLDR locale data via Babel."""

from __future__ import annotations

from datetime import date
from logging import getLogger

from babel import Locale, UnknownLocaleError
from babel.dates import format_date

from birthpick.domain.types import DEFAULT_LOCALE

log = getLogger(__name__)

# Stand-alone wide month name ("LLLL"), the form used when a month appears on its own.
MONTH_NAME_PATTERN = "LLLL"
_REFERENCE_YEAR = 2020


def strip_extensions(identifier: str) -> str:
    """Drop BCP 47 extension and private-use subtags (``-u-ca-gregory``, ``-x-...``)."""

    subtags = identifier.split("-")
    for index, subtag in enumerate(subtags[1:], start=1):
        if len(subtag) == 1:
            return "-".join(subtags[:index])
    return identifier


def resolve_locale(identifier: str, *, fallback: str = DEFAULT_LOCALE) -> Locale:
    """Parse a ``-`` separated locale identifier, falling back when Babel rejects it."""

    try:
        return Locale.parse(strip_extensions(identifier), sep="-")
    except (ValueError, TypeError, UnknownLocaleError) as exc:
        log.debug("Unrecognised locale %r (%s); using %s", identifier, exc, fallback)
        return Locale.parse(fallback, sep="-")


class BabelMonthNameFormatter:
    """``MonthNameFormatter`` backed by Babel.

    A plain ``date`` is formatted, so there is no timezone that could shift the first
    of the month into the previous one.
    """

    def __init__(self, *, fallback_locale: str = DEFAULT_LOCALE) -> None:
        self._fallback_locale = fallback_locale

    def format_month(self, month: int, locale: str) -> str:
        resolved = resolve_locale(locale, fallback=self._fallback_locale)
        return format_date(date(_REFERENCE_YEAR, month, 1), format=MONTH_NAME_PATTERN, locale=resolved)


__all__ = ["MONTH_NAME_PATTERN", "BabelMonthNameFormatter", "resolve_locale", "strip_extensions"]
