"""
config.py

Purpose:
    Provide a single function get_settings() that builds the engine settings
    from environment variables (optionally loaded from a .env file).

Usage:
    from recipe_normalizer.config import get_settings
"""
from __future__ import annotations
import logging
import os       # os module to read environment variables
from dataclasses import dataclass

from dotenv import load_dotenv      # Load environment variables from .env file

load_dotenv()  # loads .env

ENV_PREFIX = "RECIPE_NORMALIZER_"


@dataclass(frozen=True)
class EngineSettings:
    log_level: str = "INFO"
    description_max_chars: int = 500
    progress_every: int = 100


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _level_env(name: str, default: str) -> str:
    raw = os.environ.get(ENV_PREFIX + name, default).strip().upper()
    # getLevelName returns an int only for registered level names
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


# Settings are read on every call so tests can patch os.environ.
def get_settings() -> EngineSettings:
    """Create engine settings using env vars."""
    return EngineSettings(
        log_level=_level_env("LOG_LEVEL", "INFO"),
        description_max_chars=_int_env("DESCRIPTION_MAX_CHARS", 500),
        progress_every=max(1, _int_env("PROGRESS_EVERY", 100)),
    )
