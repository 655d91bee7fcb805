"""Ports for locale-aware calendar formatting."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MonthNameFormatter(Protocol):
    """Formats a month number (1-12) as its long name in a given locale."""

    def format_month(self, month: int, locale: str) -> str:
        ...


__all__ = ["MonthNameFormatter"]
