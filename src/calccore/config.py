"""Settings read from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from calccore.exceptions import ConfigurationError

ENV_PREFIX = "CALCCORE_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(name, raw)


def _parse_log_level(name: str, raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(name, raw)
    return level


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the terminal shell."""

    log_level: str = "WARNING"
    show_state: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from ``CALCCORE_*`` environment variables.

        Args:
            environ: Mapping to read from (default: ``os.environ``)

        Raises:
            ConfigurationError: If a variable holds an unusable value
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        name = f"{ENV_PREFIX}LOG_LEVEL"
        if name in env:
            kwargs["log_level"] = _parse_log_level(name, env[name])

        name = f"{ENV_PREFIX}SHOW_STATE"
        if name in env:
            kwargs["show_state"] = _parse_bool(name, env[name])

        return cls(**kwargs)
