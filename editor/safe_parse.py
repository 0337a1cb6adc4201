from __future__ import annotations
"""Lenient number coercion for values read back from the autosave slot.

The autosave is written by this program, but it lives on disk between runs
and may have been edited or truncated.  Viewport numbers that cannot be read
fall back to a default with a warning instead of discarding the whole slot;
the map contents themselves are never coerced.
"""

from typing import Any
import math
import logging

logger = logging.getLogger(__name__)


def to_int(value: Any, default: int = 0) -> int:
    """Coerce ``value`` to ``int``.

    Booleans are refused.  Strings are stripped and parsed when they look
    like integers; finite floats are truncated.  Anything else logs a warning
    and returns ``default``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if s and (s.isdigit() or (s[0] in {"+", "-"} and s[1:].isdigit())):
            return int(s)
    if value is None:
        return default
    logger.warning("to_int: coercing %r to default %r", value, default)
    return default


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce ``value`` to a finite ``float`` or return ``default``."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        f = float(value)
        if math.isfinite(f):
            return f
    elif isinstance(value, str):
        try:
            f = float(value.strip())
        except ValueError:
            f = math.nan
        if math.isfinite(f):
            return f
    elif value is None:
        return default
    logger.warning("to_float: coercing %r to default %r", value, default)
    return default
