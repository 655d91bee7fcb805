"""Pydantic models for the payload a host hands to the picker."""

from __future__ import annotations

from datetime import date  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class HostBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class HostSelection(HostBaseModel):
    year: int | None = None
    month: int | None = Field(default=None, ge=1, le=12)
    day: int | None = Field(default=None, ge=1, le=31)


class HostQueries(HostBaseModel):
    year: str = ""
    month: str = ""
    day: str = ""


class HostPayload(HostBaseModel):
    """Inputs supplied by the embedding application.

    ``value`` is the previously stored ``YYYY-MM-DD`` string; it is kept as text so a
    malformed value clears the selection instead of failing validation. ``selection``
    carries in-progress choices and takes precedence over ``value`` when present.
    """

    today: date | None = None
    min_year: float | None = Field(default=None, alias="minYear")
    locale: str | None = None
    month_names: list[str] | None = Field(default=None, alias="monthNames")
    value: str | None = None
    selection: HostSelection | None = None
    queries: HostQueries = Field(default_factory=HostQueries)
