"""Domain entity holding per-user notification delivery settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class NotificationPreferences:
    """Mapping of notification type to a "deliver" flag for one user."""

    user_id: str
    settings: dict[str, bool] = field(default_factory=dict)
    updated_at: datetime | None = None

    def allows(self, notification_type: str) -> bool:
        """Return ``False`` only when ``notification_type`` was explicitly disabled."""

        return self.settings.get(notification_type, True) is not False

    def merged(self, partial: dict[str, bool]) -> "NotificationPreferences":
        """Return a copy with ``partial`` overwriting the matching types."""

        return NotificationPreferences(
            user_id=self.user_id,
            settings={**self.settings, **partial},
            updated_at=self.updated_at,
        )


__all__ = ["NotificationPreferences"]
