"""Endpoints for listing notifications and changing their read state."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_notifications as count_notifications_uc,
    create_notification as create_notification_uc,
    delete_read_notifications as delete_read_notifications_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
)
from app.domain.entities import PageCursor
from app.domain.exceptions import NotificationError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_recipient_id
from app.interfaces.api.routes_helpers import http_error_from, notification_to_schema
from app.interfaces.api.schemas import (
    DeleteReadResponse,
    MarkAllReadResponse,
    NotificationCountRead,
    NotificationCreate,
    NotificationCreateResponse,
    NotificationListResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _parse_cursor(before: str | None, cursor: str | None) -> PageCursor | None:
    if before and cursor:
        raise HTTPException(
            status_code=422,
            detail="Send either 'before' or 'cursor', not both",
        )
    try:
        if cursor:
            return PageCursor.decode(cursor)
        if before:
            return PageCursor.from_timestamp(before)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return None


@router.get("", response_model=NotificationListResponse)
def list_notifications(
    limit: int | None = Query(None, description="Page size, clamped to the configured maximum"),
    before: str | None = Query(None, description="ISO timestamp; only older records are returned"),
    cursor: str | None = Query(None, description="Opaque token from a previous 'next_token'"),
    db: Session = Depends(get_db),
    recipient_id: str = Depends(get_current_recipient_id),
) -> NotificationListResponse:
    """Return one page of the authenticated user's notifications, newest first."""

    page_cursor = _parse_cursor(before, cursor)
    try:
        page = list_notifications_uc(db, recipient_id, limit=limit, before=page_cursor)
    except NotificationError as exc:
        raise http_error_from(exc) from exc

    return NotificationListResponse(
        notifications=[notification_to_schema(n) for n in page.records],
        next_cursor=page.next_cursor.created_at if page.next_cursor else None,
        next_token=page.next_cursor.encode() if page.next_cursor else None,
        has_more=page.has_more,
    )


@router.get("/count", response_model=NotificationCountRead)
def count_notifications(
    db: Session = Depends(get_db),
    recipient_id: str = Depends(get_current_recipient_id),
) -> NotificationCountRead:
    """Return total and unread counts for the authenticated user."""

    try:
        counts = count_notifications_uc(db, recipient_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return NotificationCountRead(total=counts.total, unread=counts.unread)


@router.post("", response_model=NotificationCreateResponse)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    actor_id: str = Depends(get_current_recipient_id),
) -> NotificationCreateResponse:
    """Create a notification for ``recipient_id`` unless that type is disabled."""

    try:
        notification = create_notification_uc(
            db,
            recipient_id=payload.recipient_id,
            notification_type=payload.type,
            data=payload.data,
            link=payload.link,
            actor_id=actor_id,
        )
    except NotificationError as exc:
        raise http_error_from(exc) from exc

    if notification is None:
        return NotificationCreateResponse(notification=None)
    return NotificationCreateResponse(notification=notification_to_schema(notification))


@router.post("/mark-all-read", response_model=MarkAllReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    recipient_id: str = Depends(get_current_recipient_id),
) -> MarkAllReadResponse:
    """Mark every unread notification of the authenticated user as read."""

    try:
        updated = mark_all_notifications_read_uc(db, recipient_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return MarkAllReadResponse(updated=updated)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    recipient_id: str = Depends(get_current_recipient_id),
) -> NotificationRead:
    """Mark one notification as read; repeating the call is harmless."""

    try:
        notification = mark_notification_read_uc(db, recipient_id, notification_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return notification_to_schema(notification)


@router.delete("/read", response_model=DeleteReadResponse)
def delete_read(
    db: Session = Depends(get_db),
    recipient_id: str = Depends(get_current_recipient_id),
) -> DeleteReadResponse:
    """Delete the authenticated user's read notifications."""

    try:
        deleted = delete_read_notifications_uc(db, recipient_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    logger.info("Deleted %s read notifications for %s", deleted, recipient_id)
    return DeleteReadResponse(deleted=deleted)
