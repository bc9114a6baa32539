"""Parsing helpers for pagination parameters."""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def atoi_default(text: str, default: int) -> int:
    """Parse a plain decimal integer, or return ``default``.

    Only an optional sign and ASCII digits are accepted: no surrounding
    whitespace or underscores. Values outside the signed 64-bit range
    also yield ``default``.
    """
    if not text or not _INT_RE.fullmatch(text):
        return default
    value = int(text)
    if value < _INT_MIN or value > _INT_MAX:
        return default
    return value