"""Date key helpers for time-series data.

Date keys are canonical 8-digit ``YYYYMMDD`` strings. Because they are fixed
width and zero padded, lexical order equals chronological order.
"""

from datetime import date, datetime, timedelta
from typing import List, Optional
import re

from .series import TimePoint

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_KEY_FORMAT = "%Y%m%d"


def normalize_date_token(token: str) -> str:
    """Rewrite ``YYYY-MM-DD`` to ``YYYYMMDD``; other forms pass through unchanged."""
    if _ISO_DATE.match(token):
        return token.replace("-", "")
    return token


def parse_date_key(key: str) -> Optional[date]:
    """Convert a ``YYYYMMDD`` key to a date, or None if it is not one."""
    try:
        return datetime.strptime(key, DATE_KEY_FORMAT).date()
    except ValueError:
        return None


def format_date_key(value: date) -> str:
    return value.strftime(DATE_KEY_FORMAT)


def format_date_label(key: str) -> str:
    """``20250101`` -> ``2025/01/01``"""
    return f"{key[0:4]}/{key[4:6]}/{key[6:8]}"


def fill_missing_dates(points: List[TimePoint]) -> List[TimePoint]:
    """
    Emit one point per calendar day between the first and last key.

    Days without data repeat the previous value with an empty tooltip. Input
    must already be sorted by key. If either end key is not a valid date the
    points are returned unchanged.

    Args:
        points: Date-sorted points of one series

    Returns:
        Gap-free list of points
    """
    if not points:
        return []

    start = parse_date_key(points[0].date)
    end = parse_date_key(points[-1].date)
    if start is None or end is None:
        return list(points)

    # Last point per key wins when filling, as with any keyed lookup
    by_key = {point.date: point for point in points}

    filled: List[TimePoint] = []
    previous: Optional[TimePoint] = None
    current = start
    while current <= end:
        key = format_date_key(current)
        existing = by_key.get(key)
        if existing is not None:
            filled.append(TimePoint(key, existing.value, existing.tooltip))
            previous = existing
        elif previous is not None:
            filled.append(TimePoint(key, previous.value, ""))
        current += timedelta(days=1)

    return filled
