"""Pydantic models for notification preferences."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, RootModel, StrictBool


class NotificationPreferencesRead(BaseModel):
    user_id: str
    settings: dict[str, bool] = Field(
        default_factory=dict,
        description="Types missing from the map are delivered",
    )
    updated_at: datetime | None = None


class NotificationPreferencesUpdate(RootModel[dict[str, StrictBool]]):
    """Partial settings map; only the listed types are overwritten."""


__all__ = ["NotificationPreferencesRead", "NotificationPreferencesUpdate"]
