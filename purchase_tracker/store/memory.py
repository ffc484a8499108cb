"""
Purchase Store
===============
In-memory purchase storage.

Stands in for the persistence layer: it hands validated ``Purchase`` records
to the urgency engine and applies create/update/archive through the compute
helpers so deadlines are always derived, never entered.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..models.purchase import CreatePurchaseInput, Purchase, PurchaseStatus, UpdatePurchaseInput
from ..compute.purchases import archive_purchase, create_purchase, update_purchase

logger = logging.getLogger(__name__)

ORDERABLE_FIELDS = ("purchase_date", "created_at", "return_deadline", "warranty_expiry")


class PurchaseNotFoundError(KeyError):
    """Raised when an operation targets an unknown purchase id."""


class PurchaseStore:
    """Purchases keyed by id, kept in insertion order."""

    def __init__(self, purchases: Optional[List[Purchase]] = None):
        self._purchases: Dict[str, Purchase] = {}
        for purchase in purchases or []:
            self.add(purchase)

    def __len__(self) -> int:
        return len(self._purchases)

    def add(self, purchase: Purchase) -> Purchase:
        """Store an already-built purchase, replacing any with the same id."""
        self._purchases[purchase.id] = purchase
        return purchase

    def create(self, data: CreatePurchaseInput) -> Purchase:
        """Create a purchase with computed deadlines."""
        purchase = self.add(create_purchase(data))
        logger.info(f"Created purchase - id={purchase.id}, name={purchase.name}")
        return purchase

    def get(self, purchase_id: str) -> Optional[Purchase]:
        return self._purchases.get(purchase_id)

    def _require(self, purchase_id: str) -> Purchase:
        purchase = self.get(purchase_id)
        if purchase is None:
            raise PurchaseNotFoundError(purchase_id)
        return purchase

    def list(
        self,
        status: Optional[PurchaseStatus] = None,
        store: Optional[str] = None,
        order_by: str = "created_at",
        descending: bool = True,
    ) -> List[Purchase]:
        """
        List purchases with optional filters.

        Records without a value for ``order_by`` always come last.
        """
        if order_by not in ORDERABLE_FIELDS:
            raise ValueError(f"Cannot order by '{order_by}'")

        results = [
            p for p in self._purchases.values()
            if (status is None or p.status == status) and (store is None or p.store == store)
        ]
        present = [p for p in results if getattr(p, order_by)]
        missing = [p for p in results if not getattr(p, order_by)]
        present.sort(key=lambda p: getattr(p, order_by), reverse=descending)
        return present + missing

    def search(self, query: str) -> List[Purchase]:
        """Case-insensitive substring search over name and store, newest first."""
        needle = query.lower()
        matches = [
            p for p in self._purchases.values()
            if needle in p.name.lower() or needle in (p.store or "").lower()
        ]
        return sorted(matches, key=lambda p: p.created_at, reverse=True)

    def update(self, purchase_id: str, changes: UpdatePurchaseInput) -> Purchase:
        updated = self.add(update_purchase(self._require(purchase_id), changes))
        logger.info(f"Updated purchase - id={purchase_id}, fields={sorted(changes.model_fields_set)}")
        return updated

    def archive(self, purchase_id: str) -> Purchase:
        archived = self.add(archive_purchase(self._require(purchase_id)))
        logger.info(f"Archived purchase - id={purchase_id}")
        return archived

    def delete(self, purchase_id: str) -> bool:
        """Hard delete. Returns False if the id was unknown."""
        removed = self._purchases.pop(purchase_id, None)
        if removed is None:
            logger.warning(f"Delete requested for unknown purchase - id={purchase_id}")
            return False
        return True

    def unique_stores(self) -> List[str]:
        return sorted({p.store for p in self._purchases.values() if p.store})

    def counts(self) -> Dict[str, int]:
        active = sum(1 for p in self._purchases.values() if p.status == PurchaseStatus.ACTIVE)
        return {"total": len(self), "active": active, "archived": len(self) - active}

    def load_records(self, records: List[Dict[str, Any]]) -> int:
        """Validate and add raw purchase dicts. Returns how many were added."""
        for record in records:
            self.add(Purchase.model_validate(record))
        return len(records)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "PurchaseStore":
        """
        Load a store from a JSON file holding a list of purchases, or an
        object with a ``purchases`` list.
        """
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)

        records = payload.get("purchases", []) if isinstance(payload, dict) else payload
        store = cls()
        count = store.load_records(records)
        logger.info(f"Loaded {count} purchases from {path}")
        return store
