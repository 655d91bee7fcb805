"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .picker import PickerConfig, get_picker_config, resolve_locale, resolve_min_year

__all__ = [
    "ConfigurationError",
    "PickerConfig",
    "configure_logging",
    "get_picker_config",
    "optional_env_var",
    "optional_int_env_var",
    "resolve_locale",
    "resolve_min_year",
]
