"""
Runtime settings and logging setup.

Settings come from environment variables; an optional .env file in the
current working directory is loaded first (it never overrides the shell).

    GRADEPLANNER_LOG_LEVEL   DEBUG / INFO / WARNING (default) / ERROR
    GRADEPLANNER_DECIMALS    digits shown after the decimal point (default 2)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DECIMALS = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    decimals: int = DEFAULT_DECIMALS


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _level_env(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().upper()
    return raw if raw in LOG_LEVELS else default


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Read settings from the environment (after loading .env if present).
    """
    load_dotenv(env_file or Path.cwd() / ".env", override=False)
    return Settings(
        log_level=_level_env("GRADEPLANNER_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        decimals=_int_env("GRADEPLANNER_DECIMALS", DEFAULT_DECIMALS),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        force=True,
    )
