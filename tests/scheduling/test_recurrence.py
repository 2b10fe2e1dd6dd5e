"""Tests for recurring schedule projection."""

from datetime import datetime, timedelta, timezone

import pytest

from trendcraft.scheduling import (
    RecurrenceRule,
    RecurrenceType,
    ScheduleEntry,
    next_occurrence,
    next_run,
)


class TestNextOccurrence:
    """Test projection of the next occurrence."""

    def test_weekly(self):
        result = next_occurrence(datetime(2024, 1, 1), RecurrenceType.WEEKLY, datetime(2024, 1, 20))
        assert result == datetime(2024, 1, 22)

    def test_accepts_string_period(self):
        assert next_occurrence(datetime(2024, 1, 1), "weekly", datetime(2024, 1, 20)) == datetime(2024, 1, 22)

    def test_anchor_in_future_is_returned(self):
        anchor = datetime(2024, 3, 1, 9, 0)
        assert next_occurrence(anchor, RecurrenceType.DAILY, datetime(2024, 2, 1)) == anchor

    def test_anchor_equal_to_now_is_returned(self):
        anchor = datetime(2024, 3, 1, 9, 0)
        assert next_occurrence(anchor, RecurrenceType.WEEKLY, anchor) == anchor

    def test_occurrence_equal_to_now_is_returned(self):
        result = next_occurrence(datetime(2024, 1, 1), RecurrenceType.WEEKLY, datetime(2024, 1, 15))
        assert result == datetime(2024, 1, 15)

    def test_daily_exact_multiple_of_period(self):
        anchor = datetime(2024, 1, 1, 9, 0)
        now = anchor + timedelta(days=10)
        assert next_occurrence(anchor, "daily", now) == anchor + timedelta(days=10)

    def test_weekly_exact_multiple_of_period(self):
        anchor = datetime(2024, 1, 1, 9, 0)
        now = anchor + timedelta(weeks=3)
        assert next_occurrence(anchor, RecurrenceType.WEEKLY, now) == now

    def test_daily_keeps_time_of_day(self):
        anchor = datetime(2024, 1, 1, 18, 30)
        result = next_occurrence(anchor, RecurrenceType.DAILY, datetime(2024, 1, 10, 19, 0))
        assert result == datetime(2024, 1, 11, 18, 30)

    def test_daily_same_day_before_time(self):
        anchor = datetime(2024, 1, 1, 18, 30)
        result = next_occurrence(anchor, RecurrenceType.DAILY, datetime(2024, 1, 10, 8, 0))
        assert result == datetime(2024, 1, 10, 18, 30)

    def test_monthly(self):
        result = next_occurrence(datetime(2024, 1, 15), RecurrenceType.MONTHLY, datetime(2024, 4, 20))
        assert result == datetime(2024, 5, 15)

    def test_monthly_clamps_to_month_end(self):
        result = next_occurrence(datetime(2024, 1, 31), RecurrenceType.MONTHLY, datetime(2024, 2, 10))
        assert result == datetime(2024, 2, 29)

    def test_monthly_steps_from_previous_occurrence(self):
        # Jan 31 -> Feb 29 (clamped) -> Mar 29
        result = next_occurrence(datetime(2024, 1, 31), RecurrenceType.MONTHLY, datetime(2024, 3, 15))
        assert result == datetime(2024, 3, 29)

    def test_monthly_clamp_carries_forward(self):
        result = next_occurrence(datetime(2024, 1, 31), RecurrenceType.MONTHLY, datetime(2024, 4, 1))
        assert result == datetime(2024, 4, 29)

    def test_monthly_non_leap_year(self):
        result = next_occurrence(datetime(2023, 1, 31), RecurrenceType.MONTHLY, datetime(2023, 2, 1))
        assert result == datetime(2023, 2, 28)

    def test_monthly_crosses_year(self):
        result = next_occurrence(datetime(2023, 11, 30), RecurrenceType.MONTHLY, datetime(2024, 1, 5))
        assert result == datetime(2024, 1, 30)

    def test_far_past_anchor(self):
        anchor = datetime(2000, 1, 1)
        now = datetime(2024, 6, 15, 12)
        result = next_occurrence(anchor, RecurrenceType.WEEKLY, now)
        assert now <= result < now + timedelta(weeks=1)
        assert (result - anchor) % timedelta(weeks=1) == timedelta(0)

    def test_timezone_aware(self):
        anchor = datetime(2024, 1, 1, 9, tzinfo=timezone.utc)
        now = datetime(2024, 1, 3, 10, tzinfo=timezone.utc)
        assert next_occurrence(anchor, RecurrenceType.DAILY, now) == datetime(2024, 1, 4, 9, tzinfo=timezone.utc)

    @pytest.mark.parametrize("period", list(RecurrenceType))
    @pytest.mark.parametrize("days_later", [1, 13, 45, 400])
    def test_result_is_first_at_or_after_now(self, period, days_later):
        anchor = datetime(2024, 1, 31, 9)
        now = anchor + timedelta(days=days_later, hours=1)
        result = next_occurrence(anchor, period, now)
        assert result >= now
        assert result.time() == anchor.time()

    def test_unknown_period_rejected(self):
        with pytest.raises(ValueError):
            next_occurrence(datetime(2024, 1, 1), "yearly", datetime(2024, 2, 1))

    def test_mixed_awareness_raises(self):
        with pytest.raises(TypeError):
            next_occurrence(datetime(2024, 1, 1), "daily", datetime(2024, 2, 1, tzinfo=timezone.utc))


class TestNextRun:
    """Test projection from schedule entries."""

    def test_non_recurring_entry(self):
        entry = ScheduleEntry(scheduled_time=datetime(2024, 1, 1))
        assert next_run(entry, datetime(2024, 1, 20)) is None

    def test_recurring_entry(self):
        entry = ScheduleEntry(
            scheduled_time=datetime(2024, 1, 1),
            recurring=RecurrenceRule(type=RecurrenceType.WEEKLY),
        )
        assert next_run(entry, datetime(2024, 1, 20)) == datetime(2024, 1, 22)

    def test_end_date_stops_projection(self):
        entry = ScheduleEntry(
            scheduled_time=datetime(2024, 1, 1),
            recurring=RecurrenceRule(type="weekly", end_date=datetime(2024, 1, 21)),
        )
        assert next_run(entry, datetime(2024, 1, 20)) is None

    def test_occurrence_on_end_date_is_kept(self):
        entry = ScheduleEntry(
            scheduled_time=datetime(2024, 1, 1),
            recurring=RecurrenceRule(type="weekly", end_date=datetime(2024, 1, 22)),
        )
        assert next_run(entry, datetime(2024, 1, 20)) == datetime(2024, 1, 22)

    def test_camel_case_payload(self):
        entry = ScheduleEntry.model_validate({
            "scheduledTime": "2024-01-01T09:00:00",
            "recurring": {"type": "daily", "endDate": "2024-12-31T00:00:00"},
        })
        assert next_run(entry, datetime(2024, 1, 5, 10)) == datetime(2024, 1, 6, 9)

    def test_entry_is_not_modified(self):
        entry = ScheduleEntry(
            scheduled_time=datetime(2024, 1, 1),
            recurring=RecurrenceRule(type="daily"),
        )
        next_run(entry, datetime(2024, 2, 1))
        assert entry.scheduled_time == datetime(2024, 1, 1)
