"""Domain port definitions for adapters."""

from __future__ import annotations

from .formatting import MonthNameFormatter

__all__ = ["MonthNameFormatter"]
