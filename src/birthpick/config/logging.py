"""Shared logging helpers for birthpick."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV = "BIRTHPICK_LOG_LEVEL"


def _level_from_environment() -> int:
    name = optional_env_var(LOG_LEVEL_ENV)
    if name is None:
        return logging.INFO
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"{LOG_LEVEL_ENV} must be a logging level name, got {name!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger with a terse format suitable for CLI output.

    Without an explicit ``level`` the ``BIRTHPICK_LOG_LEVEL`` environment variable is
    consulted, then INFO. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=_level_from_environment() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
