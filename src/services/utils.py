"""Shared conversion helpers for values coming back from raw SQL."""
import math
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional


def to_int(value, default: int = 0) -> int:
    """Convert a count column (int, big integer, Decimal, numeric string) to int.

    ``None`` and unparseable values return *default*.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, Decimal):
        return int(value) if value.is_finite() else default
    if isinstance(value, str):
        cleaned = value.replace(",", "").strip()
        if not cleaned:
            return default
        try:
            return int(Decimal(cleaned))
        except (InvalidOperation, ValueError, OverflowError):
            return default
    return default


def to_float(value, default: Optional[float] = None) -> Optional[float]:
    """Convert a numeric/decimal column to float; ``None`` gives *default*."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float, Decimal)):
        result = float(value)
        return result if math.isfinite(result) else default
    if isinstance(value, str):
        cleaned = value.replace(",", "").strip()
        if not cleaned:
            return default
        try:
            result = float(cleaned)
        except ValueError:
            return default
        return result if math.isfinite(result) else default
    return default


def to_datetime(value) -> Optional[datetime]:
    """Parse a timestamp column. SQLite returns these as ISO strings in views."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None
