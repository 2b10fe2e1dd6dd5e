"""Timestamp helpers for scheduling.

All helpers keep the tzinfo of their input: aware datetimes stay aware,
naive datetimes stay naive. Mixing the two in a comparison raises
``TypeError`` like any other datetime comparison.

Usage:
    from trendcraft.utils.timestamps import now_utc, add_months, parse_timestamp

    utc_now = now_utc()
    dt = parse_timestamp("2024-01-31")
    add_months(dt, 1)  # 2024-02-29 (clamped to month end)
"""

from __future__ import annotations

import calendar
from datetime import datetime, timezone


def now_utc() -> datetime:
    """Get current time in UTC with timezone info."""
    return datetime.now(timezone.utc)


def add_months(dt: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the target month's length.

    Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year), never Mar 2/3.
    The time of day and tzinfo are preserved.

    Args:
        dt: Starting datetime.
        months: Number of months to add (may be negative).

    Returns:
        Shifted datetime.
    """
    month_index = dt.month - 1 + months
    year = dt.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return dt.replace(year=year, month=month, day=min(dt.day, last_day))


def parse_timestamp(s: str) -> datetime:
    """Parse an ISO 8601 date or datetime string.

    Handles:
    - Date only: "2024-01-20" (midnight)
    - Naive ISO: "2024-01-20T09:30:00"
    - ISO with offset: "2024-01-20T09:30:00+00:00"
    - ISO with Z: "2024-01-20T09:30:00Z"

    Raises:
        ValueError: If the string is not a recognised timestamp.
    """
    s = s.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise ValueError(f"Unrecognised timestamp: {s!r}") from e
