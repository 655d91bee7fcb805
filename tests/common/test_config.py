from __future__ import annotations

import logging
import math

import pytest

from birthpick.config import (
    ConfigurationError,
    PickerConfig,
    configure_logging,
    get_picker_config,
    optional_env_var,
    optional_int_env_var,
    resolve_locale,
    resolve_min_year,
)
from birthpick.domain.types import DEFAULT_LOCALE, DEFAULT_MIN_YEAR, DateParts


def test_optional_env_var_returns_stripped_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value ")

    assert optional_env_var("EXAMPLE_VAR") == "value"


def test_optional_env_var_treats_blank_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    assert optional_env_var("EXAMPLE_VAR") is None
    assert optional_env_var("MISSING_VAR") is None


def test_optional_int_env_var_raises_on_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "nineteen")

    with pytest.raises(ConfigurationError) as exc:
        optional_int_env_var("EXAMPLE_VAR")

    assert "EXAMPLE_VAR" in str(exc.value)


def test_get_picker_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BIRTHPICK_MIN_YEAR", raising=False)
    monkeypatch.delenv("BIRTHPICK_LOCALE", raising=False)

    assert get_picker_config() == PickerConfig(min_year=DEFAULT_MIN_YEAR, locale=DEFAULT_LOCALE)


def test_get_picker_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIRTHPICK_MIN_YEAR", "1950")
    monkeypatch.setenv("BIRTHPICK_LOCALE", "de-DE")

    assert get_picker_config() == PickerConfig(min_year=1950, locale="de-DE")


def test_resolve_min_year_clamps_and_truncates() -> None:
    today = DateParts(year=2024, month=6, day=10)

    assert resolve_min_year(None, today) == DEFAULT_MIN_YEAR
    assert resolve_min_year(math.nan, today) == DEFAULT_MIN_YEAR
    assert resolve_min_year(1975.9, today) == 1975
    assert resolve_min_year(1800, today) == DEFAULT_MIN_YEAR
    assert resolve_min_year(2030, today) == 2024
    assert resolve_min_year(math.inf, today) == 2024
    assert resolve_min_year(-math.inf, today) == DEFAULT_MIN_YEAR


def test_resolve_locale_defaults_blank_values() -> None:
    assert resolve_locale(None) == DEFAULT_LOCALE
    assert resolve_locale("  ") == DEFAULT_LOCALE
    assert resolve_locale("fr-FR") == "fr-FR"


def test_configure_logging_reads_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIRTHPICK_LOG_LEVEL", "warning")
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        configure_logging(force=True)
        assert root.level == logging.WARNING
        configure_logging(level=logging.DEBUG, force=True)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)


def test_configure_logging_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIRTHPICK_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError):
        configure_logging(force=True)
