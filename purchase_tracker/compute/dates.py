"""
Date Utilities

Deadline computation and formatting helpers. All values are calendar dates
(YYYY-MM-DD); time of day and timezone never enter the arithmetic.

Every function that compares against "today" accepts an optional ``today``
argument. When it is omitted the clock is read once via ``current_date()``.
"""

from datetime import date, datetime, timedelta
from dateutil.relativedelta import relativedelta
from typing import Optional, Union

from ..models.urgency import DeadlineStatus, DeadlineStatusType


DATE_FORMAT = "%Y-%m-%d"

# Deadlines this close count as "soon" in get_deadline_status
SOON_DAYS = 7

DateLike = Union[str, date]


def current_date() -> date:
    """The clock: today's calendar date."""
    return date.today()


def resolve_today(today: Optional[date] = None) -> date:
    """Return ``today`` if supplied, otherwise read the clock."""
    if today is None:
        return current_date()
    if isinstance(today, datetime):
        return today.date()
    return today


def parse_date(value: DateLike) -> date:
    """
    Parse a YYYY-MM-DD string into a date.

    Raises:
        ValueError: if the string is not a calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, DATE_FORMAT).date()


def get_current_date_iso(today: Optional[date] = None) -> str:
    """Get current date as ISO string (date only, no time)."""
    return resolve_today(today).isoformat()


def get_current_datetime_iso() -> str:
    """Get current datetime as ISO string."""
    return datetime.now().isoformat()


def compute_return_deadline(purchase_date: DateLike, window_days: int) -> str:
    """
    Compute return deadline from purchase date and return window.

    Args:
        purchase_date: Date of purchase (YYYY-MM-DD)
        window_days: Whole days in the return window (>= 0)

    Returns:
        Deadline date (YYYY-MM-DD)
    """
    return (parse_date(purchase_date) + timedelta(days=window_days)).isoformat()


def compute_warranty_expiry(purchase_date: DateLike, warranty_months: int) -> str:
    """
    Compute warranty expiry from purchase date and warranty months.

    Month arithmetic clamps to the last day of the target month, so
    Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year).

    Args:
        purchase_date: Date of purchase (YYYY-MM-DD)
        warranty_months: Calendar months of coverage (>= 0)

    Returns:
        Expiry date (YYYY-MM-DD)
    """
    return (parse_date(purchase_date) + relativedelta(months=warranty_months)).isoformat()


def days_until(deadline: DateLike, today: Optional[date] = None) -> int:
    """
    Get days remaining until a deadline.

    Negative values indicate overdue.
    """
    return (parse_date(deadline) - resolve_today(today)).days


def is_overdue(deadline: DateLike, today: Optional[date] = None) -> bool:
    """Check if a deadline is overdue (strictly before today)."""
    return parse_date(deadline) < resolve_today(today)


def is_deadline_today(deadline: DateLike, today: Optional[date] = None) -> bool:
    """Check if deadline is today."""
    return parse_date(deadline) == resolve_today(today)


def is_due_soon(deadline: DateLike, within_days: int, today: Optional[date] = None) -> bool:
    """
    Check if deadline is today or within ``within_days`` days from today.

    Overdue deadlines are not "due soon".
    """
    days = days_until(deadline, today)
    return 0 <= days <= within_days


def format_display_date(value: DateLike) -> str:
    """Format date for display (e.g., "January 8, 2026")."""
    d = parse_date(value)
    return f"{d:%B} {d.day}, {d.year}"


def format_short_date(value: DateLike) -> str:
    """Format date short (e.g., "Jan 8")."""
    d = parse_date(value)
    return f"{d:%b} {d.day}"


def _pluralize_days(days: int) -> str:
    return f"{days} day{'s' if days != 1 else ''}"


def get_deadline_status(deadline: DateLike, today: Optional[date] = None) -> DeadlineStatus:
    """
    Get deadline status text and bucket.

    overdue if days < 0, today if days == 0, soon if days <= 7, else normal.
    """
    days = days_until(deadline, today)

    if days < 0:
        return DeadlineStatus(text=f"{_pluralize_days(abs(days))} overdue", type=DeadlineStatusType.OVERDUE)

    if days == 0:
        return DeadlineStatus(text="Due today", type=DeadlineStatusType.TODAY)

    if days <= SOON_DAYS:
        return DeadlineStatus(text=f"{_pluralize_days(days)} left", type=DeadlineStatusType.SOON)

    return DeadlineStatus(text=f"{_pluralize_days(days)} left", type=DeadlineStatusType.NORMAL)
