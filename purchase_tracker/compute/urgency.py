"""
Urgency Classification

Central source of truth for urgency tiers.

URGENCY TIERS:
- URGENT: requires action now. Overdue or due within the critical window.
- UPCOMING: awareness needed. Action within the planning horizon.
- REFERENCE: historical or far-future. Safe to de-emphasize.

THRESHOLDS (fixed defaults, see ``UrgencyThresholds``):
- Return URGENT: <= 3 days (or overdue)
- Return UPCOMING: 4-14 days
- Warranty URGENT: <= 7 days (or overdue)
- Warranty UPCOMING: 8-30 days

All functions are pure. "Today" is resolved once per top-level call and
passed down, so every record in a collection is judged against the same
date.
"""

from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import UrgencyThresholds, ActionWindows
from ..models.purchase import PurchaseStatus
from ..models.urgency import (
    ActionItems,
    DeadlineClassification,
    DeadlineKind,
    DeadlineRecord,
    TIER_PRIORITY,
    UrgencyClassification,
    UrgencyGroups,
    UrgencyTier,
)
from .dates import days_until, parse_date, resolve_today

# Fixed defaults. Configured values are passed in by the caller.
DEFAULT_THRESHOLDS = UrgencyThresholds()
DEFAULT_ACTION_WINDOWS = ActionWindows()


def classify_deadline(
    deadline: Optional[str],
    urgent_threshold: int,
    upcoming_threshold: int,
    today: Optional[date] = None,
) -> DeadlineClassification:
    """Classify a single deadline against its thresholds."""
    if not deadline:
        return DeadlineClassification(tier=UrgencyTier.REFERENCE, days=None)

    days = days_until(deadline, resolve_today(today))

    if days < 0:
        # Overdue
        return DeadlineClassification(tier=UrgencyTier.URGENT, days=days)

    if days <= urgent_threshold:
        return DeadlineClassification(tier=UrgencyTier.URGENT, days=days)

    if days <= upcoming_threshold:
        return DeadlineClassification(tier=UrgencyTier.UPCOMING, days=days)

    return DeadlineClassification(tier=UrgencyTier.REFERENCE, days=days)


def get_urgency_classification(
    record: DeadlineRecord,
    today: Optional[date] = None,
    thresholds: Optional[UrgencyThresholds] = None,
) -> UrgencyClassification:
    """
    Get the urgency classification for a record.

    Considers both return deadline and warranty expiry and keeps the more
    urgent of the two. Within the same tier the return deadline wins.
    Archived records are always reference.
    """
    if record.status == PurchaseStatus.ARCHIVED:
        return UrgencyClassification()

    today = resolve_today(today)
    thresholds = thresholds or DEFAULT_THRESHOLDS

    return_result = classify_deadline(
        record.return_deadline,
        thresholds.return_urgent_days,
        thresholds.return_upcoming_days,
        today,
    )
    warranty_result = classify_deadline(
        record.warranty_expiry,
        thresholds.warranty_urgent_days,
        thresholds.warranty_upcoming_days,
        today,
    )

    if return_result.days is not None and warranty_result.days is not None:
        if TIER_PRIORITY[return_result.tier] <= TIER_PRIORITY[warranty_result.tier]:
            primary, chosen = DeadlineKind.RETURN, return_result
        else:
            primary, chosen = DeadlineKind.WARRANTY, warranty_result
    elif return_result.days is not None:
        primary, chosen = DeadlineKind.RETURN, return_result
    elif warranty_result.days is not None:
        primary, chosen = DeadlineKind.WARRANTY, warranty_result
    else:
        return UrgencyClassification()

    return UrgencyClassification(
        tier=chosen.tier,
        primary_deadline=primary,
        days_remaining=chosen.days,
        is_overdue=chosen.days < 0,
    )


def get_urgency_tier(
    record: DeadlineRecord,
    today: Optional[date] = None,
    thresholds: Optional[UrgencyThresholds] = None,
) -> UrgencyTier:
    """Get urgency tier for a record (simplified accessor)."""
    return get_urgency_classification(record, today, thresholds).tier


def _sort_key(classification: UrgencyClassification) -> Tuple[int, bool, int]:
    # Tier first, then days remaining with "no deadline" after everything else
    days = classification.days_remaining
    return (TIER_PRIORITY[classification.tier], days is None, days if days is not None else 0)


def _classified(
    records: Iterable[DeadlineRecord],
    today: date,
    thresholds: Optional[UrgencyThresholds],
) -> List[Tuple[DeadlineRecord, UrgencyClassification]]:
    return [(record, get_urgency_classification(record, today, thresholds)) for record in records]


def _sorted(pairs: List[Tuple[DeadlineRecord, UrgencyClassification]]) -> List[DeadlineRecord]:
    # sorted() is stable, so equal keys keep their input order
    return [record for record, _ in sorted(pairs, key=lambda pair: _sort_key(pair[1]))]


def sort_by_urgency(
    records: Iterable[DeadlineRecord],
    today: Optional[date] = None,
    thresholds: Optional[UrgencyThresholds] = None,
) -> List[DeadlineRecord]:
    """
    Sort records by urgency (urgent first, then upcoming, then reference).

    Within each tier records are ordered by days remaining, most critical
    first. Returns a new list; the input is not modified.
    """
    return _sorted(_classified(records, resolve_today(today), thresholds))


def group_by_urgency(
    records: Iterable[DeadlineRecord],
    today: Optional[date] = None,
    thresholds: Optional[UrgencyThresholds] = None,
) -> UrgencyGroups:
    """Group records by urgency tier, each group sorted by urgency."""
    buckets = {tier: [] for tier in UrgencyTier}
    for record, classification in _classified(records, resolve_today(today), thresholds):
        buckets[classification.tier].append((record, classification))

    return UrgencyGroups(
        urgent=_sorted(buckets[UrgencyTier.URGENT]),
        upcoming=_sorted(buckets[UrgencyTier.UPCOMING]),
        reference=_sorted(buckets[UrgencyTier.REFERENCE]),
    )


def filter_urgent(
    records: Iterable[DeadlineRecord],
    today: Optional[date] = None,
    thresholds: Optional[UrgencyThresholds] = None,
) -> List[DeadlineRecord]:
    """Filter to only urgent records, sorted by urgency."""
    pairs = _classified(records, resolve_today(today), thresholds)
    return _sorted([pair for pair in pairs if pair[1].tier == UrgencyTier.URGENT])


def count_urgent(
    records: Iterable[DeadlineRecord],
    today: Optional[date] = None,
    thresholds: Optional[UrgencyThresholds] = None,
) -> int:
    """Get count of urgent records."""
    today = resolve_today(today)
    return sum(1 for record in records if get_urgency_tier(record, today, thresholds) == UrgencyTier.URGENT)


def has_urgent_items(
    records: Iterable[DeadlineRecord],
    today: Optional[date] = None,
    thresholds: Optional[UrgencyThresholds] = None,
) -> bool:
    """Check if there are any urgent records. Stops at the first match."""
    today = resolve_today(today)
    return any(get_urgency_tier(record, today, thresholds) == UrgencyTier.URGENT for record in records)


def _by_deadline(records: Sequence[DeadlineRecord], attribute: str) -> List[DeadlineRecord]:
    return sorted(records, key=lambda record: parse_date(getattr(record, attribute)))


def get_action_items(
    records: Iterable[DeadlineRecord],
    today: Optional[date] = None,
    windows: Optional[ActionWindows] = None,
) -> ActionItems:
    """
    Collect active records with deadlines needing attention.

    - overdue: return deadline already passed
    - return_due_soon: return deadline between today and the due-soon window
    - warranty_expiring_soon: warranty expiry between today and its window

    Each list is ordered by its deadline, earliest first.
    """
    today = resolve_today(today)
    windows = windows or DEFAULT_ACTION_WINDOWS

    overdue, return_due_soon, warranty_expiring_soon = [], [], []
    for record in records:
        if record.status != PurchaseStatus.ACTIVE:
            continue

        if record.return_deadline:
            days = days_until(record.return_deadline, today)
            if days < 0:
                overdue.append(record)
            elif days <= windows.return_due_soon_days:
                return_due_soon.append(record)

        if record.warranty_expiry:
            days = days_until(record.warranty_expiry, today)
            if 0 <= days <= windows.warranty_expiring_days:
                warranty_expiring_soon.append(record)

    return ActionItems(
        overdue=_by_deadline(overdue, "return_deadline"),
        return_due_soon=_by_deadline(return_due_soon, "return_deadline"),
        warranty_expiring_soon=_by_deadline(warranty_expiring_soon, "warranty_expiry"),
    )
