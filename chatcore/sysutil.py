"""Small helpers for process configuration."""

from __future__ import annotations

import logging

PANIC = logging.CRITICAL + 10
logging.addLevelName(PANIC, "PANIC")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": PANIC,
}

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})


def set_log_level(level: str) -> int:
    """Set the root logger's level from a name and return the numeric level.

    Names are case-insensitive: debug, info, warn/warning, error, fatal,
    panic. Empty or unknown names select info.
    """
    value = _LEVELS.get(level.strip().lower(), logging.INFO)
    logging.getLogger().setLevel(value)
    return value


def is_truthy(value: str) -> bool:
    """Report whether a setting string means true (1, true, yes, y, on)."""
    return value.strip().lower() in _TRUTHY


def first_non_empty(*args: str) -> str:
    """Return the first argument that is not blank, unchanged, or ""."""
    return next((v for v in args if v.strip()), "")