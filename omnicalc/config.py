"""Runtime settings for omnicalc, read from the environment.

    OMNICALC_PRECISION     significant digits for results (default 10)
    OMNICALC_HISTORY_SIZE  calculations kept in history (default 10)
    OMNICALC_LOG_LEVEL     logging level name (default WARNING)

CLI options override whatever the environment provides.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

_ENV_PREFIX = "OMNICALC_"

DEFAULT_PRECISION = 10
DEFAULT_HISTORY_SIZE = 10
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    precision: int = DEFAULT_PRECISION
    history_size: int = DEFAULT_HISTORY_SIZE
    log_level: str = DEFAULT_LOG_LEVEL

    def with_overrides(self, **overrides) -> Settings:
        """Copy with any non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(_ENV_PREFIX + key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _log_level(env: Mapping[str, str]) -> str:
    name = env.get(_ENV_PREFIX + "LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    # getLevelName returns "Level X" for unknown names
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``env`` (defaults to os.environ)."""
    env = os.environ if env is None else env
    return Settings(
        precision=_positive_int(env, "PRECISION", DEFAULT_PRECISION),
        history_size=_positive_int(env, "HISTORY_SIZE", DEFAULT_HISTORY_SIZE),
        log_level=_log_level(env),
    )
