"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    recipient_id: str
    type: str
    data: str | dict[str, Any] | None = None
    read: bool = False
    created_at: datetime
    link: str | None = None
    actor_id: str | None = None


class NotificationListResponse(BaseModel):
    """One page of notifications plus the position to continue from."""

    notifications: list[NotificationRead] = Field(default_factory=list)
    next_cursor: datetime | None = Field(
        default=None,
        description="createdAt of the last record; send it back as 'before'",
    )
    next_token: str | None = Field(
        default=None,
        description="Opaque (createdAt, id) cursor; send it back as 'cursor'",
    )
    has_more: bool = False


class NotificationCreate(BaseModel):
    """Payload used by producers to create a notification."""

    model_config = ConfigDict(extra="forbid")

    recipient_id: str = Field(..., min_length=1, max_length=64)
    type: str = Field(..., min_length=1, max_length=64)
    data: str | dict[str, Any] | None = None
    link: str | None = Field(default=None, max_length=512)


class NotificationCreateResponse(BaseModel):
    """``notification`` is ``None`` when the recipient disabled the type."""

    notification: NotificationRead | None = None


class NotificationCountRead(BaseModel):
    total: int
    unread: int


class MarkAllReadResponse(BaseModel):
    updated: int


class DeleteReadResponse(BaseModel):
    deleted: int


__all__ = [
    "DeleteReadResponse",
    "MarkAllReadResponse",
    "NotificationCountRead",
    "NotificationCreate",
    "NotificationCreateResponse",
    "NotificationListResponse",
    "NotificationRead",
]
