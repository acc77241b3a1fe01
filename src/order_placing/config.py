"""Configuration for the order-placing entry point.

Settings come from environment variables so the same wiring works in a
shell, a container or a test that passes its own mapping.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

LOG_LEVEL_ENV = "ORDER_PLACING_LOG_LEVEL"
SEND_ACKNOWLEDGMENTS_ENV = "ORDER_PLACING_SEND_ACKNOWLEDGMENTS"

_FALSY = {"0", "false", "no", "off"}


class InvalidSettingError(Exception):
    """Raised when an environment variable holds a value we cannot use."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r}")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    send_acknowledgments: bool = True


def parse_log_level(value: str) -> int:
    """Convert a level name such as ``debug`` into its numeric value.

    Raises:
        InvalidSettingError: If the name is not a standard logging level.
    """
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise InvalidSettingError(LOG_LEVEL_ENV, value)
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build ``Settings`` from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    log_level = parse_log_level(env.get(LOG_LEVEL_ENV, "INFO"))
    send = env.get(SEND_ACKNOWLEDGMENTS_ENV, "true").strip().lower() not in _FALSY
    return Settings(log_level=log_level, send_acknowledgments=send)
