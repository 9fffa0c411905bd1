"""Environment helpers shared by the command-line entry points."""
from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def env_str(name: str, default: str) -> str:
    """Read a string from an environment variable with fallback."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw


def env_bool(name: str, default: bool) -> bool:
    """Read a boolean from an environment variable with fallback.

    Recognises ``1/true/yes/on`` and ``0/false/no/off``; anything else falls
    back to *default*.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning("ignoring invalid boolean %s=%r; using %s", name, raw, default)
    return default


def log_level_from_env(name: str, default: int = logging.WARNING) -> int:
    """Resolve a logging level name (``DEBUG``, ``info``...) or number from the environment."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    text = raw.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if isinstance(level, int):
        return level
    logger.warning("ignoring invalid log level %s=%r", name, raw)
    return default
