"""Lenient conversion of raw form values into record field types.

Form collaborators submit whatever the operator typed. Numeric fields never
fail: anything that cannot be read as a number becomes zero.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_TRUTHY = {"true", "1", "yes", "on", "y", "t"}


def to_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return int(value or 0)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def to_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return float(value or 0)
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        match = _LEADING_FLOAT.match(str(value))
        if not match:
            return 0.0
        result = float(match.group(1))
    return result if math.isfinite(result) else 0.0


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in _TRUTHY


def to_text(value: Any) -> str:
    return "" if value is None else str(value)


def to_date(value: Any, *, default: date | None = None) -> date:
    """Parse an ISO calendar date, falling back to ``default`` (today)."""
    fallback = default or date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None:
        return fallback
    text = str(value).strip()
    try:
        # Tolerate full timestamps by keeping only the date portion
        return date.fromisoformat(text[:10])
    except ValueError:
        return fallback
