"""Scheduling helpers for recurring posts."""

from .recurrence import (
    RecurrenceRule,
    RecurrenceType,
    ScheduleEntry,
    advance,
    next_occurrence,
    next_run,
)

__all__ = [
    "RecurrenceRule",
    "RecurrenceType",
    "ScheduleEntry",
    "advance",
    "next_occurrence",
    "next_run",
]
