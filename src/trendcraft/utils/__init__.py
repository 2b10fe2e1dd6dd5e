"""Utility modules for TrendCraft."""

from .selection import (
    PickOne,
    first_pick,
    index_pick,
    last_pick,
    random_pick,
)
from .timestamps import (
    add_months,
    now_utc,
    parse_timestamp,
)

__all__ = [
    # Selection
    "PickOne",
    "first_pick",
    "index_pick",
    "last_pick",
    "random_pick",
    # Timestamps
    "add_months",
    "now_utc",
    "parse_timestamp",
]
