"""Runtime settings for the hourlog time tracker.

Values come from environment variables, optionally supplied through a
``.env`` file in the working directory.  Anything missing or malformed
falls back to the default shown on ``Settings``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

APPEARANCE_MODES = ("light", "dark")
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _int(raw: Optional[str], default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value > 0 else default


def _bool(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class Settings:
    title: str = "Hourlog Time Tracker"
    geometry: str = "900x600"
    appearance_mode: str = "light"
    recent_entry_limit: int = 5
    # Below this window width the sidebar collapses behind a menu button.
    compact_width: int = 768
    seed_demo_data: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (default: ``.env`` plus ``os.environ``)."""
        if environ is None:
            load_dotenv()
            environ = os.environ
        defaults = cls()

        appearance = environ.get("HOURLOG_APPEARANCE", defaults.appearance_mode).strip().lower()
        if appearance not in APPEARANCE_MODES:
            appearance = defaults.appearance_mode

        log_level = environ.get("HOURLOG_LOG_LEVEL", defaults.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = defaults.log_level

        return cls(
            title=environ.get("HOURLOG_TITLE", "").strip() or defaults.title,
            geometry=environ.get("HOURLOG_GEOMETRY", "").strip() or defaults.geometry,
            appearance_mode=appearance,
            recent_entry_limit=_int(environ.get("HOURLOG_RECENT_LIMIT"), defaults.recent_entry_limit),
            compact_width=_int(environ.get("HOURLOG_COMPACT_WIDTH"), defaults.compact_width),
            seed_demo_data=_bool(environ.get("HOURLOG_SEED_DATA"), defaults.seed_demo_data),
            log_level=log_level,
        )
