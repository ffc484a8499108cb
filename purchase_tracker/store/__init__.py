"""Storage layer."""

from .memory import PurchaseStore, PurchaseNotFoundError

__all__ = ["PurchaseStore", "PurchaseNotFoundError"]
