"""Translate host payloads into picker requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from birthpick.config.picker import resolve_locale, resolve_min_year
from birthpick.domain.dates import today_parts
from birthpick.domain.selection import selection_from_iso
from birthpick.domain.types import Selection
from birthpick.domain.view import PickerRequest

if TYPE_CHECKING:
    from birthpick.domain.types import DateParts

    from .schema import HostPayload


def translate_host_payload(payload: HostPayload, *, today: DateParts) -> PickerRequest:
    """Build a request; ``today`` is used only when the payload does not carry one."""

    effective_today = today_parts(payload.today) if payload.today is not None else today
    if payload.selection is not None:
        selection = Selection(
            year=payload.selection.year,
            month=payload.selection.month,
            day=payload.selection.day,
        )
    else:
        selection = selection_from_iso(payload.value)

    return PickerRequest(
        today=effective_today,
        min_year=resolve_min_year(payload.min_year, effective_today),
        locale=resolve_locale(payload.locale),
        month_names=payload.month_names,
        selection=selection,
        year_query=payload.queries.year,
        month_query=payload.queries.month,
        day_query=payload.queries.day,
    )
