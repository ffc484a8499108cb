"""
Purchase Models

Pydantic models for purchase records and the inputs used to create or
update them.
"""

from datetime import date, datetime
from typing import Optional, Any
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
import uuid


class PurchaseStatus(str, Enum):
    """Purchase lifecycle states."""
    ACTIVE = "active"
    ARCHIVED = "archived"


def _validate_iso_date(value: Any) -> Any:
    """Normalize a calendar date to its YYYY-MM-DD string form."""
    # compute imports the models package, so import at call time
    from ..compute.dates import parse_date

    if value is None or value == "":
        return None
    if not isinstance(value, (str, date)):
        raise ValueError(f"Expected a YYYY-MM-DD date, got {type(value).__name__}")
    # Raises ValueError for anything that is not a calendar date
    return parse_date(value).isoformat()


class _TrackerModel(BaseModel):
    """Base model accepting both snake_case and camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )


class Purchase(_TrackerModel):
    """
    A tracked purchase.

    Only ``status``, ``return_deadline`` and ``warranty_expiry`` matter to the
    urgency engine; the remaining fields are carried for display and storage.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    store: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None

    purchase_date: str
    return_window_days: Optional[int] = Field(default=None, ge=0)
    return_deadline: Optional[str] = None
    warranty_months: Optional[int] = Field(default=None, ge=0)
    warranty_expiry: Optional[str] = None

    serial_number: Optional[str] = None
    notes: Optional[str] = None
    status: PurchaseStatus = PurchaseStatus.ACTIVE

    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    updated_at: str = Field(default_factory=lambda: datetime.now().isoformat())

    @field_validator("purchase_date", "return_deadline", "warranty_expiry", mode="before")
    @classmethod
    def _check_dates(cls, value: Any) -> Any:
        return _validate_iso_date(value)

    @property
    def is_archived(self) -> bool:
        return self.status == PurchaseStatus.ARCHIVED


class CreatePurchaseInput(_TrackerModel):
    """Input for creating a purchase."""
    name: str = Field(min_length=1)
    purchase_date: str
    store: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    return_window_days: Optional[int] = Field(default=None, ge=0)
    warranty_months: Optional[int] = Field(default=None, ge=0)
    serial_number: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("purchase_date", mode="before")
    @classmethod
    def _check_purchase_date(cls, value: Any) -> Any:
        return _validate_iso_date(value)


class UpdatePurchaseInput(_TrackerModel):
    """
    Partial update for a purchase.

    Only fields that were explicitly set are applied (see
    ``model_fields_set``), so ``return_window_days=None`` clears the return
    window while leaving it out keeps the current one.
    """
    name: Optional[str] = None
    store: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    purchase_date: Optional[str] = None
    return_window_days: Optional[int] = Field(default=None, ge=0)
    warranty_months: Optional[int] = Field(default=None, ge=0)
    serial_number: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[PurchaseStatus] = None

    @field_validator("purchase_date", mode="before")
    @classmethod
    def _check_purchase_date(cls, value: Any) -> Any:
        return _validate_iso_date(value)
