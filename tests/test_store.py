"""
Unit Tests for the in-memory Purchase Store
"""

import json
import pytest

from purchase_tracker.models import CreatePurchaseInput, PurchaseStatus, UpdatePurchaseInput
from purchase_tracker.store import PurchaseNotFoundError, PurchaseStore


@pytest.fixture
def store(make_purchase):
    return PurchaseStore([
        make_purchase("a", name="Laptop", store="Costco", purchase_date="2026-01-02",
                      warranty_expiry="2028-01-02", created_at="2026-01-02T09:00:00"),
        make_purchase("b", name="Kettle", store="Target", purchase_date="2026-01-10",
                      return_deadline="2026-02-09", created_at="2026-01-10T09:00:00"),
        make_purchase("c", name="Costco membership card holder", store=None, purchase_date="2026-01-05",
                      status="archived", created_at="2026-01-05T09:00:00"),
    ])


class TestPurchaseStore:
    """Tests for store operations."""

    def test_create_derives_deadlines(self):
        store = PurchaseStore()
        purchase = store.create(CreatePurchaseInput(name="Shoes", purchase_date="2026-01-08", return_window_days=30))
        assert store.get(purchase.id).return_deadline == "2026-02-07"
        assert len(store) == 1

    def test_get_unknown_returns_none(self, store):
        assert store.get("missing") is None

    def test_list_newest_first(self, store):
        assert [p.id for p in store.list()] == ["b", "c", "a"]

    def test_list_filters(self, store):
        assert [p.id for p in store.list(status=PurchaseStatus.ACTIVE)] == ["b", "a"]
        assert [p.id for p in store.list(store="Costco")] == ["a"]

    def test_list_by_deadline_puts_missing_last(self, store):
        ordered = store.list(order_by="return_deadline", descending=False)
        assert [p.id for p in ordered] == ["b", "a", "c"]

    def test_list_rejects_unknown_order(self, store):
        with pytest.raises(ValueError):
            store.list(order_by="price")

    def test_search_name_and_store(self, store):
        assert [p.id for p in store.search("costco")] == ["c", "a"]
        assert [p.id for p in store.search("KETTLE")] == ["b"]

    def test_update(self, store):
        updated = store.update("b", UpdatePurchaseInput(return_window_days=14))
        assert updated.return_deadline == "2026-01-24"
        assert store.get("b").return_deadline == "2026-01-24"

    def test_archive(self, store):
        store.archive("a")
        assert store.get("a").status == PurchaseStatus.ARCHIVED
        assert store.counts() == {"total": 3, "active": 1, "archived": 2}

    def test_unknown_id_raises(self, store):
        with pytest.raises(PurchaseNotFoundError):
            store.archive("missing")
        with pytest.raises(KeyError):
            store.update("missing", UpdatePurchaseInput(notes="x"))

    def test_delete(self, store):
        assert store.delete("a") is True
        assert store.delete("a") is False
        assert store.get("a") is None

    def test_unique_stores(self, store):
        assert store.unique_stores() == ["Costco", "Target"]

    def test_from_json(self, tmp_path):
        path = tmp_path / "purchases.json"
        path.write_text(json.dumps({"purchases": [
            {"id": "x", "name": "Drill", "purchaseDate": "2026-01-01", "returnDeadline": "2026-01-31"},
        ]}))
        store = PurchaseStore.from_json(path)
        assert store.get("x").return_deadline == "2026-01-31"

    def test_from_json_list(self, tmp_path):
        path = tmp_path / "purchases.json"
        path.write_text(json.dumps([{"id": "y", "purchaseDate": "2026-01-01"}]))
        assert len(PurchaseStore.from_json(path)) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
