"""Shared fixtures. Every test pins "today" instead of reading the clock."""

from datetime import date

import pytest

from purchase_tracker.models import Purchase


TODAY = date(2026, 2, 5)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_purchase():
    """Factory for purchases with only the fields a test cares about."""
    def _make(id="P-1", return_deadline=None, warranty_expiry=None, status="active", **kwargs):
        kwargs.setdefault("purchase_date", "2026-01-08")
        kwargs.setdefault("name", id)
        return Purchase(
            id=id,
            return_deadline=return_deadline,
            warranty_expiry=warranty_expiry,
            status=status,
            **kwargs,
        )
    return _make


@pytest.fixture
def mixed_purchases(make_purchase):
    """One purchase per interesting case, relative to TODAY (2026-02-05)."""
    return [
        make_purchase("far-warranty", warranty_expiry="2026-12-01"),        # reference, 299 days
        make_purchase("return-upcoming", return_deadline="2026-02-15"),     # upcoming, 10 days
        make_purchase("no-deadlines-a"),                                    # reference, no days
        make_purchase("return-overdue", return_deadline="2026-02-01"),      # urgent, -4 days
        make_purchase("archived", return_deadline="2026-01-01", status="archived"),
        make_purchase("warranty-urgent", warranty_expiry="2026-02-10"),     # urgent, 5 days
        make_purchase("no-deadlines-b"),                                    # reference, no days
        make_purchase("warranty-upcoming", warranty_expiry="2026-03-01"),   # upcoming, 24 days
    ]
