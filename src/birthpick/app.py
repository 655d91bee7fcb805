"""Application entry points wiring the picker domain to its default adapters."""

from __future__ import annotations

from datetime import date
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from birthpick.adapters.babel import BabelMonthNameFormatter
from birthpick.adapters.host import HostPayload, translate_host_payload
from birthpick.domain.dates import today_parts
from birthpick.domain.options import build_month_options
from birthpick.domain.view import PickerRequest, PickerView, build_picker_view

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from birthpick.domain.ports import MonthNameFormatter
    from birthpick.domain.types import DateParts, MonthOption


log = getLogger(__name__)


class Clock(Protocol):
    def __call__(self) -> date: ...


def _local_today() -> date:
    return date.today()


def today_from_clock(clock: Clock = _local_today) -> DateParts:
    return today_parts(clock())


def render_picker(
    request: PickerRequest,
    *,
    formatter: MonthNameFormatter | None = None,
) -> PickerView:
    """Build the picker view, defaulting to Babel month names."""

    effective_formatter = formatter or BabelMonthNameFormatter()
    view = build_picker_view(request, formatter=effective_formatter)
    log.debug(
        "Picker view: selection=%s, years=%s, months=%s, days=%s, value=%s",
        view.selection,
        len(view.years),
        len(view.months),
        len(view.days),
        view.value,
    )
    return view


def render_picker_from_payload(
    payload: Mapping[str, object] | HostPayload,
    *,
    clock: Clock = _local_today,
    formatter: MonthNameFormatter | None = None,
) -> PickerView:
    """Validate a host payload and build the view; ``clock`` fills in a missing ``today``."""

    parsed = payload if isinstance(payload, HostPayload) else HostPayload.model_validate(payload)
    request = translate_host_payload(parsed, today=today_from_clock(clock))
    return render_picker(request, formatter=formatter)


def list_month_options(
    locale: str,
    month_names: Sequence[str] | None = None,
    *,
    formatter: MonthNameFormatter | None = None,
) -> list[MonthOption]:
    return build_month_options(
        locale,
        month_names,
        formatter=formatter or BabelMonthNameFormatter(),
    )


__all__ = [
    "Clock",
    "list_month_options",
    "render_picker",
    "render_picker_from_payload",
    "today_from_clock",
]
