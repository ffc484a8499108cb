"""
Store Policy Defaults

Return windows and warranty lengths for common US retailers, used to
pre-fill a new purchase when the store is known. Users can always override.
"""

from typing import Dict, Optional
from pydantic import BaseModel

from ..config import PurchaseDefaults, config


class StorePolicy(BaseModel):
    """Return window and warranty length for a store."""
    return_days: int
    warranty_months: int


STORE_DEFAULTS: Dict[str, StorePolicy] = {
    # Extended return policies (90 days)
    "costco": StorePolicy(return_days=90, warranty_months=24),
    "rei": StorePolicy(return_days=90, warranty_months=12),
    "nordstrom": StorePolicy(return_days=90, warranty_months=12),
    "ll bean": StorePolicy(return_days=90, warranty_months=12),
    "zappos": StorePolicy(return_days=90, warranty_months=12),

    # Standard return policies (30 days)
    "amazon": StorePolicy(return_days=30, warranty_months=12),
    "target": StorePolicy(return_days=30, warranty_months=12),
    "walmart": StorePolicy(return_days=30, warranty_months=12),
    "home depot": StorePolicy(return_days=30, warranty_months=12),
    "lowes": StorePolicy(return_days=30, warranty_months=12),
    "ikea": StorePolicy(return_days=30, warranty_months=12),

    # Short return policies (14-15 days)
    "best buy": StorePolicy(return_days=15, warranty_months=12),
    "apple": StorePolicy(return_days=14, warranty_months=12),
    "microcenter": StorePolicy(return_days=15, warranty_months=12),

    # Electronics retailers
    "b&h": StorePolicy(return_days=30, warranty_months=12),
    "newegg": StorePolicy(return_days=30, warranty_months=12),
}


def get_store_defaults(store_name: Optional[str]) -> Optional[StorePolicy]:
    """
    Get the policy for a store name.

    Exact (case-insensitive) match first, then partial match in either
    direction, so "Amazon Fresh" matches "amazon". Returns None for blank or
    unknown stores.
    """
    if not store_name or not store_name.strip():
        return None

    normalized = store_name.strip().lower()

    if normalized in STORE_DEFAULTS:
        return STORE_DEFAULTS[normalized]

    for key, policy in STORE_DEFAULTS.items():
        if key in normalized or normalized in key:
            return policy

    return None


def resolve_policy(store_name: Optional[str], defaults: Optional[PurchaseDefaults] = None) -> StorePolicy:
    """Store policy if known, otherwise the universal defaults."""
    policy = get_store_defaults(store_name)
    if policy is not None:
        return policy
    defaults = defaults or config.defaults
    return StorePolicy(return_days=defaults.return_window_days, warranty_months=defaults.warranty_months)
