"""Domain entity representing a user notification."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, TypeAlias


class NotificationType:
    """Notification categories known to this deployment."""

    WELCOME = "welcome"
    GROUP_INVITE = "group-invite"
    GROUP_ANNOUNCEMENT = "group-announcement"
    EVENT_UPDATE = "event-update"
    EVENT_REMINDER = "event-reminder"
    REPORT_STATUS = "report-status"
    ADMIN_WARNING = "admin-warning"

    ALL: tuple[str, ...] = (
        WELCOME,
        GROUP_INVITE,
        GROUP_ANNOUNCEMENT,
        EVENT_UPDATE,
        EVENT_REMINDER,
        REPORT_STATUS,
        ADMIN_WARNING,
    )


@dataclass(frozen=True)
class TextPayload:
    """Free-form text attached to a notification."""

    text: str
    kind: Literal["text"] = "text"

    def to_raw(self) -> str:
        return self.text


@dataclass(frozen=True)
class StructuredPayload:
    """Key/value details attached to a notification."""

    fields: Mapping[str, Any] = field(default_factory=dict)
    kind: Literal["structured"] = "structured"

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def to_raw(self) -> dict[str, Any]:
        return dict(self.fields)


NotificationPayload: TypeAlias = TextPayload | StructuredPayload


def payload_from_raw(raw: Any) -> NotificationPayload:
    """Tag a stored or submitted ``data`` value.

    Strings are always text, even when they look like JSON; the ledger never
    reinterprets what a producer stored. ``None`` becomes an empty structured
    payload.
    """

    if isinstance(raw, (TextPayload, StructuredPayload)):
        return raw
    if raw is None:
        return StructuredPayload({})
    if isinstance(raw, Mapping):
        return StructuredPayload(dict(raw))
    if isinstance(raw, str):
        return TextPayload(raw)
    return TextPayload(str(raw))


@dataclass
class Notification:
    """Information message delivered to a specific recipient."""

    id: int | None
    recipient_id: str
    type: str
    data: NotificationPayload = field(default_factory=StructuredPayload)
    read: bool = False
    created_at: datetime | None = None
    link: str | None = None
    actor_id: str | None = None


__all__ = [
    "Notification",
    "NotificationPayload",
    "NotificationType",
    "StructuredPayload",
    "TextPayload",
    "payload_from_raw",
]
