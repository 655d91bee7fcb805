"""Host integration adapter package."""

from __future__ import annotations

from .schema import HostPayload, HostQueries, HostSelection
from .translator import translate_host_payload

__all__ = ["HostPayload", "HostQueries", "HostSelection", "translate_host_payload"]
