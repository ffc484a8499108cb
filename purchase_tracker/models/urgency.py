"""
Urgency Models

Derived values produced by the urgency engine. None of these are persisted;
they are computed on demand and discarded after use.
"""

from typing import Optional, List, Any, Protocol
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class UrgencyTier(str, Enum):
    """Coarse priority bucket for a record."""
    URGENT = "urgent"
    UPCOMING = "upcoming"
    REFERENCE = "reference"


# Lower value = higher priority
TIER_PRIORITY = {
    UrgencyTier.URGENT: 0,
    UrgencyTier.UPCOMING: 1,
    UrgencyTier.REFERENCE: 2,
}


class DeadlineKind(str, Enum):
    """Which deadline drove a classification."""
    RETURN = "return"
    WARRANTY = "warranty"


class DeadlineStatusType(str, Enum):
    OVERDUE = "overdue"
    TODAY = "today"
    SOON = "soon"
    NORMAL = "normal"


class DeadlineRecord(Protocol):
    """Anything the urgency engine can classify."""
    status: str
    return_deadline: Optional[str]
    warranty_expiry: Optional[str]


class DeadlineClassification(BaseModel):
    """Classification of a single deadline."""
    tier: UrgencyTier
    days: Optional[int] = None


class UrgencyClassification(BaseModel):
    """Overall urgency of a record."""
    tier: UrgencyTier = UrgencyTier.REFERENCE
    primary_deadline: Optional[DeadlineKind] = None
    days_remaining: Optional[int] = None
    is_overdue: bool = False


class DeadlineStatus(BaseModel):
    """Human-readable label and bucket for one deadline."""
    text: str
    type: DeadlineStatusType


class UrgencyGroups(BaseModel):
    """Records partitioned by tier, each group sorted by urgency."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    urgent: List[Any] = Field(default_factory=list)
    upcoming: List[Any] = Field(default_factory=list)
    reference: List[Any] = Field(default_factory=list)

    def __getitem__(self, tier: str) -> List[Any]:
        return getattr(self, UrgencyTier(tier).value)

    @property
    def total(self) -> int:
        return len(self.urgent) + len(self.upcoming) + len(self.reference)


class ActionItems(BaseModel):
    """Active records with a deadline needing attention."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    overdue: List[Any] = Field(default_factory=list)
    return_due_soon: List[Any] = Field(default_factory=list)
    warranty_expiring_soon: List[Any] = Field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.overdue) + len(self.return_due_soon) + len(self.warranty_expiring_soon)
