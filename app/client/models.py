"""Client-side copy of a notification record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any

from app.domain.entities import NotificationPayload, payload_from_raw


@dataclass
class ClientNotification:
    """A notification as received from ``GET /api/notifications``."""

    id: int
    type: str
    created_at: str
    read: bool = False
    data: Any = None
    link: str | None = None
    recipient_id: str | None = None
    actor_id: str | None = None

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "ClientNotification":
        return cls(
            id=int(raw["id"]),
            type=str(raw.get("type") or ""),
            created_at=str(raw.get("created_at") or ""),
            read=bool(raw.get("read", False)),
            data=raw.get("data"),
            link=raw.get("link"),
            recipient_id=raw.get("recipient_id"),
            actor_id=raw.get("actor_id"),
        )

    def to_json(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def payload(self) -> NotificationPayload:
        return payload_from_raw(self.data)

    @property
    def created_at_datetime(self) -> datetime | None:
        text = self.created_at.strip()
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


__all__ = ["ClientNotification"]
