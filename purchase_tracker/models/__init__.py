"""Models Package - Data models for the purchase tracker."""

from .purchase import Purchase, PurchaseStatus, CreatePurchaseInput, UpdatePurchaseInput
from .urgency import (
    ActionItems,
    DeadlineClassification,
    DeadlineKind,
    DeadlineRecord,
    DeadlineStatus,
    DeadlineStatusType,
    TIER_PRIORITY,
    UrgencyClassification,
    UrgencyGroups,
    UrgencyTier,
)

__all__ = [
    "Purchase",
    "PurchaseStatus",
    "CreatePurchaseInput",
    "UpdatePurchaseInput",
    "ActionItems",
    "DeadlineClassification",
    "DeadlineKind",
    "DeadlineRecord",
    "DeadlineStatus",
    "DeadlineStatusType",
    "TIER_PRIORITY",
    "UrgencyClassification",
    "UrgencyGroups",
    "UrgencyTier",
]
