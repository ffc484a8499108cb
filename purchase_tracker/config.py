"""
Configuration Management for Purchase Tracker
==============================================
Centralized configuration for urgency thresholds, purchase defaults and the
tool server.
"""

import os
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class UrgencyThresholds(BaseModel):
    """Day thresholds that map a deadline onto an urgency tier."""

    return_urgent_days: int = Field(default=3, ge=0, description="Return: urgent if <= this many days")
    return_upcoming_days: int = Field(default=14, ge=0, description="Return: upcoming if <= this many days")
    warranty_urgent_days: int = Field(default=7, ge=0, description="Warranty: urgent if <= this many days")
    warranty_upcoming_days: int = Field(default=30, ge=0, description="Warranty: upcoming if <= this many days")

    @model_validator(mode="after")
    def _check_order(self) -> "UrgencyThresholds":
        for kind in ("return", "warranty"):
            urgent = getattr(self, f"{kind}_urgent_days")
            upcoming = getattr(self, f"{kind}_upcoming_days")
            if urgent > upcoming:
                raise ValueError(
                    f"{kind}_urgent_days ({urgent}) must not exceed {kind}_upcoming_days ({upcoming})"
                )
        return self


class ActionWindows(BaseModel):
    """Look-ahead windows for the action items view."""

    return_due_soon_days: int = Field(default=7, ge=0)
    warranty_expiring_days: int = Field(default=30, ge=0)


class PurchaseDefaults(BaseModel):
    """Defaults applied when the store policy is unknown."""

    return_window_days: int = 30
    warranty_months: int = 12
    currency: str = "USD"


class ServerConfig(BaseModel):
    """Configuration for the tool server."""

    name: str = "purchase-deadlines"
    host: str = "127.0.0.1"
    port: int = 8002
    url: Optional[str] = None  # If deployed remotely

    def get_url(self) -> str:
        """Get the server URL (local or remote)."""
        if self.url:
            return self.url
        return f"http://{self.host}:{self.port}/mcp"


class TrackerConfig(BaseModel):
    """Main configuration for the purchase tracker."""

    thresholds: UrgencyThresholds = Field(default_factory=UrgencyThresholds)
    action_windows: ActionWindows = Field(default_factory=ActionWindows)
    defaults: PurchaseDefaults = Field(default_factory=PurchaseDefaults)
    server: ServerConfig = Field(default_factory=ServerConfig)
    log_level: str = Field(default="INFO", description="Root logging level")
    data_path: Optional[str] = Field(default=None, description="JSON file of purchases loaded by the server")

    @classmethod
    def from_env(cls) -> "TrackerConfig":
        """Load configuration from environment variables."""

        def env_int(name: str, default: int) -> int:
            return int(os.environ.get(f"PURCHASE_TRACKER_{name}", str(default)))

        thresholds = UrgencyThresholds(
            return_urgent_days=env_int("RETURN_URGENT_DAYS", 3),
            return_upcoming_days=env_int("RETURN_UPCOMING_DAYS", 14),
            warranty_urgent_days=env_int("WARRANTY_URGENT_DAYS", 7),
            warranty_upcoming_days=env_int("WARRANTY_UPCOMING_DAYS", 30),
        )

        action_windows = ActionWindows(
            return_due_soon_days=env_int("RETURN_DUE_SOON_DAYS", 7),
            warranty_expiring_days=env_int("WARRANTY_EXPIRING_DAYS", 30),
        )

        defaults = PurchaseDefaults(
            return_window_days=env_int("DEFAULT_RETURN_DAYS", 30),
            warranty_months=env_int("DEFAULT_WARRANTY_MONTHS", 12),
            currency=os.environ.get("PURCHASE_TRACKER_CURRENCY", "USD"),
        )

        server = ServerConfig(
            host=os.environ.get("PURCHASE_TRACKER_HOST", "127.0.0.1"),
            port=env_int("PORT", 8002),
            url=os.environ.get("PURCHASE_TRACKER_URL"),
        )

        return cls(
            thresholds=thresholds,
            action_windows=action_windows,
            defaults=defaults,
            server=server,
            log_level=os.environ.get("PURCHASE_TRACKER_LOG_LEVEL", "INFO").upper(),
            data_path=os.environ.get("PURCHASE_TRACKER_DATA"),
        )


# Global config instance
config = TrackerConfig.from_env()
