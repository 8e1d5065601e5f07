"""Numeric coercion with a zero fallback.

Form inputs arrive as strings, numbers or nothing at all. Every numeric field
goes through these helpers so the projection engine never sees bad input:
anything that does not parse becomes zero.
"""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def coerce_number(value: Any) -> float:
    """Parse the leading decimal literal of ``value``; 0.0 when there is none."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return 0.0
        number = float(match.group(1))
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_int(value: Any) -> int:
    """Parse the leading integer of ``value`` (numbers truncate toward zero)."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else 0
    return 0


def coerce_name(value: Any) -> str:
    return "" if value is None else str(value)
