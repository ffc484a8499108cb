"""
Unit Tests for Date Utilities

Deadline arithmetic, day differences and status labels.
"""

import pytest
from datetime import date, datetime, timedelta

from purchase_tracker.compute import dates
from purchase_tracker.compute.dates import (
    compute_return_deadline,
    compute_warranty_expiry,
    days_until,
    format_display_date,
    format_short_date,
    get_current_date_iso,
    get_deadline_status,
    is_deadline_today,
    is_due_soon,
    is_overdue,
    parse_date,
)
from purchase_tracker.models import DeadlineStatusType


def offset(today: date, days: int) -> str:
    return (today + timedelta(days=days)).isoformat()


class TestComputeReturnDeadline:
    """Tests for return deadline arithmetic."""

    def test_thirty_day_window(self):
        assert compute_return_deadline("2026-01-08", 30) == "2026-02-07"

    def test_fourteen_day_window(self):
        assert compute_return_deadline("2026-01-08", 14) == "2026-01-22"

    def test_month_boundary(self):
        assert compute_return_deadline("2026-01-25", 30) == "2026-02-24"

    def test_year_boundary(self):
        assert compute_return_deadline("2025-12-15", 30) == "2026-01-14"

    def test_zero_window_is_purchase_date(self):
        assert compute_return_deadline("2026-03-31", 0) == "2026-03-31"

    def test_accepts_date_objects(self):
        assert compute_return_deadline(date(2024, 2, 28), 1) == "2024-02-29"


class TestComputeWarrantyExpiry:
    """Tests for warranty expiry month arithmetic."""

    @pytest.mark.parametrize("months,expected", [
        (3, "2026-04-08"),
        (12, "2027-01-08"),
        (24, "2028-01-08"),
    ])
    def test_whole_months(self, months, expected):
        assert compute_warranty_expiry("2026-01-08", months) == expected

    def test_end_of_month_clamps(self):
        """January 31 + 1 month = February 28, not March 3."""
        assert compute_warranty_expiry("2026-01-31", 1) == "2026-02-28"

    def test_end_of_month_clamps_leap_year(self):
        assert compute_warranty_expiry("2024-01-31", 1) == "2024-02-29"

    def test_day_past_target_month_length(self):
        assert compute_warranty_expiry("2026-03-31", 1) == "2026-04-30"

    def test_leap_day_plus_year(self):
        assert compute_warranty_expiry("2024-02-29", 12) == "2025-02-28"

    def test_zero_months(self):
        assert compute_warranty_expiry("2026-01-31", 0) == "2026-01-31"


class TestDaysUntil:
    """Tests for signed day differences."""

    def test_future(self, today):
        assert days_until(offset(today, 10), today) == 10

    def test_today_is_zero(self, today):
        assert days_until(today.isoformat(), today) == 0

    def test_past_is_negative(self, today):
        assert days_until(offset(today, -5), today) == -5

    def test_time_of_day_is_ignored(self, today):
        late = datetime.combine(today, datetime.max.time())
        assert days_until(offset(today, 1), late) == 1

    def test_reads_clock_when_today_omitted(self, monkeypatch, today):
        monkeypatch.setattr(dates, "current_date", lambda: today)
        assert days_until(offset(today, 3)) == 3
        assert get_current_date_iso() == today.isoformat()


class TestOverdueAndDueSoon:
    """Tests for the overdue / due-soon predicates."""

    def test_overdue_yesterday(self, today):
        assert is_overdue(offset(today, -1), today) is True

    def test_not_overdue_today(self, today):
        assert is_overdue(today.isoformat(), today) is False

    def test_not_overdue_tomorrow(self, today):
        assert is_overdue(offset(today, 1), today) is False

    def test_deadline_today(self, today):
        assert is_deadline_today(today.isoformat(), today) is True
        assert is_deadline_today(offset(today, 1), today) is False

    @pytest.mark.parametrize("days,expected", [
        (0, True),
        (5, True),
        (7, True),
        (8, False),
        (10, False),
    ])
    def test_due_soon_window(self, today, days, expected):
        assert is_due_soon(offset(today, days), 7, today) is expected

    @pytest.mark.parametrize("days", [-1, -30, -400])
    def test_overdue_is_never_due_soon(self, today, days):
        assert is_due_soon(offset(today, days), 7, today) is False


class TestDeadlineStatus:
    """Tests for status labels."""

    def test_overdue(self, today):
        status = get_deadline_status(offset(today, -3), today)
        assert status.type == DeadlineStatusType.OVERDUE
        assert status.text == "3 days overdue"

    def test_one_day_overdue_is_singular(self, today):
        assert get_deadline_status(offset(today, -1), today).text == "1 day overdue"

    def test_today(self, today):
        status = get_deadline_status(today.isoformat(), today)
        assert status.type == DeadlineStatusType.TODAY
        assert status.text == "Due today"

    def test_one_day_left_is_singular(self, today):
        status = get_deadline_status(offset(today, 1), today)
        assert status.type == DeadlineStatusType.SOON
        assert status.text == "1 day left"

    def test_soon_upper_bound(self, today):
        status = get_deadline_status(offset(today, 7), today)
        assert status.type == DeadlineStatusType.SOON
        assert status.text == "7 days left"

    def test_normal(self, today):
        status = get_deadline_status(offset(today, 15), today)
        assert status.type == DeadlineStatusType.NORMAL
        assert status.text == "15 days left"


class TestFormatting:
    """Tests for display formatting and parsing."""

    def test_display_date(self):
        assert format_display_date("2026-01-08") == "January 8, 2026"
        assert format_display_date("2026-12-25") == "December 25, 2026"

    def test_short_date(self):
        assert format_short_date("2026-01-08") == "Jan 8"

    def test_malformed_date_raises(self):
        with pytest.raises(ValueError):
            parse_date("not-a-date")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
