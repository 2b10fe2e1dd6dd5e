"""Recurring schedule projection.

``next_occurrence`` advances an anchor date by whole periods until it is not
before ``now``. Each step adds one period to the previous occurrence.
Monthly steps add a calendar month clamped to the month's last day, so once
a Jan 31 anchor clamps to Feb 29 (leap year) later occurrences fall on the
29th.

Usage:
    from trendcraft.scheduling import next_occurrence, RecurrenceType

    next_occurrence(datetime(2024, 1, 1), RecurrenceType.WEEKLY, datetime(2024, 1, 20))
    # datetime(2024, 1, 22)
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..utils.timestamps import add_months


class RecurrenceType(str, Enum):
    """Period of a recurring schedule."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


_FIXED_STEPS = {
    RecurrenceType.DAILY: timedelta(days=1),
    RecurrenceType.WEEKLY: timedelta(weeks=1),
}


class RecurrenceRule(BaseModel):
    """How a scheduled post repeats."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: RecurrenceType
    end_date: Optional[datetime] = None


class ScheduleEntry(BaseModel):
    """The scheduling fields of a post, as read by the projector."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    scheduled_time: datetime
    recurring: Optional[RecurrenceRule] = None


def advance(dt: datetime, period: RecurrenceType, steps: int) -> datetime:
    """Move ``dt`` forward by ``steps`` whole periods."""
    if period is RecurrenceType.MONTHLY:
        return add_months(dt, steps)
    return dt + _FIXED_STEPS[period] * steps


def next_occurrence(
    anchor: datetime,
    period: "RecurrenceType | str",
    now: datetime,
) -> datetime:
    """Get the first occurrence at or after ``now``.

    Args:
        anchor: First scheduled time.
        period: daily, weekly or monthly.
        now: Reference time. Must match ``anchor`` in tz-awareness.

    Returns:
        ``anchor`` itself when it is not before ``now``, otherwise the first
        value not before ``now`` reached by repeatedly adding one period to
        the previous occurrence.

    Raises:
        ValueError: If ``period`` is not a known recurrence type.
    """
    period = RecurrenceType(period)

    candidate = anchor
    if candidate >= now:
        return candidate

    if period is not RecurrenceType.MONTHLY:
        # Jump to a whole step just before now
        candidate = advance(anchor, period, max((now - anchor) // _FIXED_STEPS[period], 1) - 1)

    while candidate < now:
        candidate = advance(candidate, period, 1)
    return candidate


def next_run(entry: ScheduleEntry, now: datetime) -> Optional[datetime]:
    """Get the next run of a recurring schedule entry.

    Returns:
        None for a non-recurring entry or when the next occurrence falls
        after the rule's end date, otherwise the projected occurrence.
        The entry is never modified.
    """
    if entry.recurring is None:
        return None

    occurrence = next_occurrence(entry.scheduled_time, entry.recurring.type, now)
    if entry.recurring.end_date is not None and occurrence > entry.recurring.end_date:
        return None
    return occurrence
