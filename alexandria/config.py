"""
alexandria.config
-----------------
Runtime settings read from the environment.

    ALEX_LOG_LEVEL   logging level name (default WARNING)
    ALEX_LOG_FILE    optional path for a second, file-backed log handler
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass
class Settings:
    log_level: int = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def _parse_level(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    # getLevelName returns "Level X" for names it doesn't know
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_level(env.get("ALEX_LOG_LEVEL")),
        log_file=env.get("ALEX_LOG_FILE") or None,
    )
