"""Cursor-based page of notifications."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from datetime import datetime

from app.domain.exceptions import PaginationValidationError
from app.utils import ensure_app_timezone, parse_iso_datetime

from .notification import Notification

_TOKEN_SEPARATOR = "|"


@dataclass(frozen=True)
class PageCursor:
    """Position in the ``(created_at desc, id desc)`` ordering.

    Without ``id`` the cursor means "strictly older than ``created_at``".
    With ``id`` it means "strictly after ``(created_at, id)``", which keeps
    records sharing a timestamp from falling between two pages.
    """

    created_at: datetime
    id: int | None = None

    @classmethod
    def from_notification(cls, notification: Notification) -> "PageCursor":
        if notification.created_at is None:
            raise PaginationValidationError("Notification has no creation timestamp")
        return cls(created_at=notification.created_at, id=notification.id)

    @classmethod
    def from_timestamp(cls, value: str) -> "PageCursor":
        try:
            return cls(created_at=parse_iso_datetime(value))
        except (OverflowError, ValueError) as exc:
            raise PaginationValidationError(f"Invalid 'before' timestamp: {value!r}") from exc

    def encode(self) -> str:
        """Return an opaque URL-safe token for this cursor."""

        created_at = ensure_app_timezone(self.created_at)
        raw = f"{created_at.isoformat()}{_TOKEN_SEPARATOR}{'' if self.id is None else self.id}"
        return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")

    @classmethod
    def decode(cls, token: str) -> "PageCursor":
        """Parse a token produced by :meth:`encode`."""

        padded = token + "=" * (-len(token) % 4)
        try:
            raw = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
            timestamp, _, identifier = raw.partition(_TOKEN_SEPARATOR)
            created_at = parse_iso_datetime(timestamp)
            cursor_id = int(identifier) if identifier else None
        except (binascii.Error, OverflowError, UnicodeError, ValueError) as exc:
            raise PaginationValidationError("Invalid pagination cursor") from exc
        return cls(created_at=created_at, id=cursor_id)


@dataclass
class NotificationPage:
    """Slice of a recipient's notifications plus the position to continue from."""

    records: list[Notification] = field(default_factory=list)
    next_cursor: PageCursor | None = None
    has_more: bool = False


__all__ = ["NotificationPage", "PageCursor"]
