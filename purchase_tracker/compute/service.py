"""
Compute Service

Deterministic deadline and urgency computations wrapped in the response
envelope used by the tool server and CLI:

    {"status": "ok", "data": {...}}
    {"status": "error", "error_code": "...", "message": "..."}

All calculations are deterministic: same input and reference date, same
output.
Urgency thresholds and action windows come from the loaded ``config``.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..config import config
from ..models.purchase import Purchase
from .dates import (
    compute_return_deadline,
    current_date,
    compute_warranty_expiry,
    days_until,
    format_display_date,
    get_deadline_status,
    parse_date,
)
from .defaults import get_store_defaults
from .urgency import (
    count_urgent,
    get_action_items,
    get_urgency_classification,
    group_by_urgency,
)

logger = logging.getLogger(__name__)


def _error(error_code: str, message: str) -> Dict[str, Any]:
    return {"status": "error", "error_code": error_code, "message": message}


def _parse_reference_date(reference_date: Optional[str]) -> date:
    """Reference date for the call; read from the clock once if absent."""
    if reference_date:
        return parse_date(reference_date)
    return current_date()


def _load_purchases(records: List[Dict[str, Any]]) -> List[Purchase]:
    return [Purchase.model_validate(record) for record in records]


def _summarize(purchase: Purchase, today: date) -> Dict[str, Any]:
    classification = get_urgency_classification(purchase, today, config.thresholds)
    return {
        "id": purchase.id,
        "name": purchase.name,
        "store": purchase.store,
        "return_deadline": purchase.return_deadline,
        "warranty_expiry": purchase.warranty_expiry,
        "status": purchase.status,
        "urgency": classification.model_dump(mode="json"),
    }


def calculate_deadlines(
    purchase_date: str,
    return_window_days: Optional[int] = None,
    warranty_months: Optional[int] = None,
    reference_date: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Calculate return deadline and warranty expiry for a purchase.

    Args:
        purchase_date: Date of purchase (YYYY-MM-DD)
        return_window_days: Return window in days
        warranty_months: Warranty length in months
        reference_date: Date to check against (defaults to today)

    Returns:
        Dictionary with the deadlines and their current status
    """
    try:
        parse_date(purchase_date)
    except (TypeError, ValueError):
        return _error("INVALID_DATE", f"Invalid purchase date format: {purchase_date}")

    try:
        today = _parse_reference_date(reference_date)
    except ValueError:
        return _error("INVALID_DATE", f"Invalid reference date format: {reference_date}")

    for label, value in (("Return window", return_window_days), ("Warranty length", warranty_months)):
        if value is not None and value < 0:
            return _error("INVALID_DURATION", f"{label} cannot be negative")

    data: Dict[str, Any] = {
        "purchase_date": purchase_date,
        "reference_date": today.isoformat(),
        "return_deadline": None,
        "warranty_expiry": None,
    }

    if return_window_days is not None:
        deadline = compute_return_deadline(purchase_date, return_window_days)
        data["return_deadline"] = deadline
        data["return_status"] = get_deadline_status(deadline, today).model_dump(mode="json")
        data["return_days_remaining"] = days_until(deadline, today)

    if warranty_months is not None:
        expiry = compute_warranty_expiry(purchase_date, warranty_months)
        data["warranty_expiry"] = expiry
        data["warranty_status"] = get_deadline_status(expiry, today).model_dump(mode="json")
        data["warranty_days_remaining"] = days_until(expiry, today)

    return {"status": "ok", "data": data}


def calculate_deadline_status(deadline: str, reference_date: Optional[str] = None) -> Dict[str, Any]:
    """Human-readable status for a single deadline."""
    try:
        today = _parse_reference_date(reference_date)
        status = get_deadline_status(deadline, today)
    except (TypeError, ValueError):
        return _error("INVALID_DATE", f"Invalid date: {deadline} / {reference_date}")

    return {
        "status": "ok",
        "data": {
            "deadline": deadline,
            "display_date": format_display_date(deadline),
            "days_remaining": days_until(deadline, today),
            **status.model_dump(mode="json"),
        },
    }


def classify_purchase(record: Dict[str, Any], reference_date: Optional[str] = None) -> Dict[str, Any]:
    """Urgency classification for one purchase record."""
    try:
        today = _parse_reference_date(reference_date)
    except ValueError:
        return _error("INVALID_DATE", f"Invalid reference date format: {reference_date}")

    try:
        purchase = Purchase.model_validate(record)
    except ValidationError as e:
        return _error("INVALID_RECORD", str(e))

    return {"status": "ok", "data": _summarize(purchase, today)}


def urgency_overview(records: List[Dict[str, Any]], reference_date: Optional[str] = None) -> Dict[str, Any]:
    """Group purchases by urgency tier with counts."""
    try:
        today = _parse_reference_date(reference_date)
    except ValueError:
        return _error("INVALID_DATE", f"Invalid reference date format: {reference_date}")

    try:
        purchases = _load_purchases(records)
    except ValidationError as e:
        return _error("INVALID_RECORD", str(e))

    groups = group_by_urgency(purchases, today, config.thresholds)
    logger.info(
        f"Urgency overview - total={groups.total}, urgent={len(groups.urgent)}, "
        f"upcoming={len(groups.upcoming)}, reference={len(groups.reference)}"
    )

    return {
        "status": "ok",
        "data": {
            "reference_date": today.isoformat(),
            "urgent_count": count_urgent(purchases, today, config.thresholds),
            "groups": {
                tier: [_summarize(p, today) for p in groups[tier]]
                for tier in ("urgent", "upcoming", "reference")
            },
        },
    }


def action_items_overview(records: List[Dict[str, Any]], reference_date: Optional[str] = None) -> Dict[str, Any]:
    """Overdue returns, returns due soon and warranties expiring soon."""
    try:
        today = _parse_reference_date(reference_date)
    except ValueError:
        return _error("INVALID_DATE", f"Invalid reference date format: {reference_date}")

    try:
        purchases = _load_purchases(records)
    except ValidationError as e:
        return _error("INVALID_RECORD", str(e))

    items = get_action_items(purchases, today, config.action_windows)

    return {
        "status": "ok",
        "data": {
            "reference_date": today.isoformat(),
            "total_count": items.total_count,
            "overdue": [_summarize(p, today) for p in items.overdue],
            "return_due_soon": [_summarize(p, today) for p in items.return_due_soon],
            "warranty_expiring_soon": [_summarize(p, today) for p in items.warranty_expiring_soon],
        },
    }


def lookup_store_defaults(store_name: str) -> Dict[str, Any]:
    """Return window and warranty length for a known store."""
    policy = get_store_defaults(store_name)
    if policy is None:
        return _error("UNKNOWN_STORE", f"No policy on file for store '{store_name}'")

    return {"status": "ok", "data": {"store": store_name, **policy.model_dump()}}
