"""
Purchase construction and updates.

Deadlines are always derived from the purchase date and the windows, never
entered directly.
"""

from typing import Optional

from dateutil.relativedelta import relativedelta

from ..config import PurchaseDefaults, config
from ..models.purchase import CreatePurchaseInput, Purchase, PurchaseStatus, UpdatePurchaseInput
from .dates import (
    compute_return_deadline,
    compute_warranty_expiry,
    days_until,
    get_current_datetime_iso,
    parse_date,
)


def derive_deadlines(purchase_date: str, return_window_days: Optional[int], warranty_months: Optional[int]):
    """Return (return_deadline, warranty_expiry); a missing or zero window yields None."""
    return_deadline = (
        compute_return_deadline(purchase_date, return_window_days) if return_window_days else None
    )
    warranty_expiry = (
        compute_warranty_expiry(purchase_date, warranty_months) if warranty_months else None
    )
    return return_deadline, warranty_expiry


def infer_return_window(purchase: Purchase) -> Optional[int]:
    """Return window implied by a stored return deadline, if any."""
    if not purchase.return_deadline:
        return None
    days = days_until(purchase.return_deadline, parse_date(purchase.purchase_date))
    return days if days > 0 else None


def infer_warranty_months(purchase: Purchase) -> Optional[int]:
    """
    Warranty length implied by a stored expiry, if it is a whole number of
    months from the purchase date.
    """
    if not purchase.warranty_expiry:
        return None
    start = parse_date(purchase.purchase_date)
    delta = relativedelta(parse_date(purchase.warranty_expiry), start)
    months = delta.years * 12 + delta.months
    # Month-end clamping can leave the expiry a few days short of a whole month
    for candidate in (months, months + 1):
        if candidate > 0 and compute_warranty_expiry(start, candidate) == purchase.warranty_expiry:
            return candidate
    return None


def create_purchase(
    data: CreatePurchaseInput,
    now: Optional[str] = None,
    defaults: Optional[PurchaseDefaults] = None,
) -> Purchase:
    """Build a new active purchase with computed deadlines."""
    now = now or get_current_datetime_iso()
    defaults = defaults or config.defaults

    return_deadline, warranty_expiry = derive_deadlines(
        data.purchase_date, data.return_window_days, data.warranty_months
    )

    return Purchase(
        name=data.name,
        store=data.store,
        price=data.price,
        currency=data.currency or defaults.currency,
        purchase_date=data.purchase_date,
        return_window_days=data.return_window_days,
        return_deadline=return_deadline,
        warranty_months=data.warranty_months,
        warranty_expiry=warranty_expiry,
        serial_number=data.serial_number,
        notes=data.notes,
        status=PurchaseStatus.ACTIVE,
        created_at=now,
        updated_at=now,
    )


def update_purchase(existing: Purchase, changes: UpdatePurchaseInput, now: Optional[str] = None) -> Purchase:
    """
    Apply a partial update and return a new purchase.

    Deadlines are recomputed from the (possibly new) purchase date and
    windows. Explicitly setting a window to None or 0 clears its deadline.

    Records imported with deadlines but no windows get their windows inferred
    from the stored deadlines when the purchase date moves. A deadline whose
    window cannot be inferred is left as stored.
    """
    provided = changes.model_dump(include=changes.model_fields_set)

    purchase_date = provided.get("purchase_date") or existing.purchase_date
    return_window_days = provided.get("return_window_days", existing.return_window_days)
    warranty_months = provided.get("warranty_months", existing.warranty_months)

    if purchase_date != existing.purchase_date:
        if return_window_days is None and "return_window_days" not in provided:
            return_window_days = infer_return_window(existing)
        if warranty_months is None and "warranty_months" not in provided:
            warranty_months = infer_warranty_months(existing)

    return_deadline = existing.return_deadline
    if return_window_days:
        return_deadline = compute_return_deadline(purchase_date, return_window_days)
    elif "return_window_days" in provided:
        return_deadline = None

    warranty_expiry = existing.warranty_expiry
    if warranty_months:
        warranty_expiry = compute_warranty_expiry(purchase_date, warranty_months)
    elif "warranty_months" in provided:
        warranty_expiry = None

    # "name" and "status" are not nullable on a purchase
    for key in ("name", "status"):
        if provided.get(key) is None:
            provided.pop(key, None)

    provided.update(
        purchase_date=purchase_date,
        return_window_days=return_window_days,
        return_deadline=return_deadline,
        warranty_months=warranty_months,
        warranty_expiry=warranty_expiry,
        updated_at=now or get_current_datetime_iso(),
    )
    return existing.model_copy(update=provided)


def archive_purchase(purchase: Purchase, now: Optional[str] = None) -> Purchase:
    """Return an archived copy of the purchase."""
    return purchase.model_copy(
        update={"status": PurchaseStatus.ARCHIVED.value, "updated_at": now or get_current_datetime_iso()}
    )
