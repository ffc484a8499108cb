"""Compute Package - Deadline arithmetic and urgency classification."""

from .dates import (
    compute_return_deadline,
    compute_warranty_expiry,
    days_until,
    format_display_date,
    format_short_date,
    get_current_date_iso,
    get_current_datetime_iso,
    get_deadline_status,
    is_deadline_today,
    is_due_soon,
    is_overdue,
)
from .urgency import (
    classify_deadline,
    count_urgent,
    filter_urgent,
    get_action_items,
    get_urgency_classification,
    get_urgency_tier,
    group_by_urgency,
    has_urgent_items,
    sort_by_urgency,
)
from .defaults import StorePolicy, get_store_defaults
from .purchases import archive_purchase, create_purchase, update_purchase

__all__ = [
    "compute_return_deadline",
    "compute_warranty_expiry",
    "days_until",
    "format_display_date",
    "format_short_date",
    "get_current_date_iso",
    "get_current_datetime_iso",
    "get_deadline_status",
    "is_deadline_today",
    "is_due_soon",
    "is_overdue",
    "classify_deadline",
    "count_urgent",
    "filter_urgent",
    "get_action_items",
    "get_urgency_classification",
    "get_urgency_tier",
    "group_by_urgency",
    "has_urgent_items",
    "sort_by_urgency",
    "StorePolicy",
    "get_store_defaults",
    "archive_purchase",
    "create_purchase",
    "update_purchase",
]
