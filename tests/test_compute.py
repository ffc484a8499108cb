"""
Unit Tests for Compute Service

Tests the status/data envelopes around deadline and urgency calculations.
"""

import pytest
from purchase_tracker.compute.service import (
    action_items_overview,
    calculate_deadline_status,
    calculate_deadlines,
    classify_purchase,
    lookup_store_defaults,
    urgency_overview,
)
from purchase_tracker.config import UrgencyThresholds, config


RECORDS = [
    {"id": "1", "name": "Headphones", "purchaseDate": "2026-01-08", "returnDeadline": "2026-02-07",
     "warrantyExpiry": "2027-01-08"},
    {"id": "2", "name": "Boots", "purchaseDate": "2025-11-01", "returnDeadline": "2026-01-31"},
    {"id": "3", "name": "Blender", "purchaseDate": "2026-01-20", "returnDeadline": "2026-02-19"},
    {"id": "4", "name": "Lamp", "purchaseDate": "2025-01-01", "warrantyExpiry": "2026-01-01",
     "status": "archived"},
]


class TestCalculateDeadlines:
    """Tests for deadline calculation."""

    def test_both_deadlines(self):
        result = calculate_deadlines("2026-01-08", 30, 12, reference_date="2026-02-05")

        assert result["status"] == "ok"
        data = result["data"]
        assert data["return_deadline"] == "2026-02-07"
        assert data["return_days_remaining"] == 2
        assert data["return_status"] == {"text": "2 days left", "type": "soon"}
        assert data["warranty_expiry"] == "2027-01-08"
        assert data["warranty_status"]["type"] == "normal"

    def test_only_return_window(self):
        result = calculate_deadlines("2026-01-08", return_window_days=14, reference_date="2026-01-08")

        assert result["data"]["return_deadline"] == "2026-01-22"
        assert result["data"]["warranty_expiry"] is None
        assert "warranty_status" not in result["data"]

    def test_invalid_date_format(self):
        result = calculate_deadlines("not-a-date", 30)

        assert result["status"] == "error"
        assert result["error_code"] == "INVALID_DATE"

    def test_invalid_reference_date(self):
        result = calculate_deadlines("2026-01-08", 30, reference_date="yesterday")
        assert result["error_code"] == "INVALID_DATE"

    def test_negative_duration(self):
        result = calculate_deadlines("2026-01-08", warranty_months=-1)

        assert result["status"] == "error"
        assert result["error_code"] == "INVALID_DURATION"


class TestDeadlineStatus:
    """Tests for single deadline status."""

    def test_overdue(self):
        result = calculate_deadline_status("2026-02-02", reference_date="2026-02-05")

        assert result["status"] == "ok"
        assert result["data"]["type"] == "overdue"
        assert result["data"]["text"] == "3 days overdue"
        assert result["data"]["days_remaining"] == -3
        assert result["data"]["display_date"] == "February 2, 2026"

    def test_invalid(self):
        assert calculate_deadline_status("2026-13-01")["error_code"] == "INVALID_DATE"


class TestClassifyPurchase:
    """Tests for single record classification."""

    def test_urgent_return(self):
        result = classify_purchase(RECORDS[0], reference_date="2026-02-05")

        assert result["status"] == "ok"
        urgency = result["data"]["urgency"]
        assert urgency == {
            "tier": "urgent",
            "primary_deadline": "return",
            "days_remaining": 2,
            "is_overdue": False,
        }

    def test_uses_configured_thresholds(self, monkeypatch):
        monkeypatch.setattr(config, "thresholds", UrgencyThresholds(return_urgent_days=0))

        result = classify_purchase(RECORDS[0], reference_date="2026-02-05")

        assert result["data"]["urgency"]["tier"] == "upcoming"

    def test_invalid_record(self):
        result = classify_purchase({"purchaseDate": "2026-02-31"}, reference_date="2026-02-05")

        assert result["status"] == "error"
        assert result["error_code"] == "INVALID_RECORD"


class TestUrgencyOverview:
    """Tests for grouped overview."""

    def test_groups_and_counts(self):
        result = urgency_overview(RECORDS, reference_date="2026-02-05")

        assert result["status"] == "ok"
        data = result["data"]
        assert data["urgent_count"] == 2
        assert [i["id"] for i in data["groups"]["urgent"]] == ["2", "1"]
        assert [i["id"] for i in data["groups"]["upcoming"]] == ["3"]
        assert [i["id"] for i in data["groups"]["reference"]] == ["4"]

    def test_empty(self):
        result = urgency_overview([], reference_date="2026-02-05")
        assert result["data"]["urgent_count"] == 0
        assert result["data"]["groups"] == {"urgent": [], "upcoming": [], "reference": []}

    def test_invalid_record(self):
        result = urgency_overview([{"id": "x"}], reference_date="2026-02-05")
        assert result["error_code"] == "INVALID_RECORD"


class TestActionItemsOverview:
    """Tests for action items."""

    def test_sections(self):
        result = action_items_overview(RECORDS, reference_date="2026-02-05")

        assert result["status"] == "ok"
        data = result["data"]
        assert [i["id"] for i in data["overdue"]] == ["2"]
        assert [i["id"] for i in data["return_due_soon"]] == ["1"]
        assert data["warranty_expiring_soon"] == []
        assert data["total_count"] == 2


class TestStoreDefaultsLookup:
    """Tests for store policy lookup."""

    def test_known_store(self):
        result = lookup_store_defaults("REI")
        assert result["status"] == "ok"
        assert result["data"] == {"store": "REI", "return_days": 90, "warranty_months": 12}

    def test_unknown_store(self):
        assert lookup_store_defaults("Corner Shop")["error_code"] == "UNKNOWN_STORE"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
