"""Cursor-paginated listing of a recipient's notifications."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import NotificationPage, PageCursor
from app.domain.exceptions import PaginationValidationError
from app.infrastructure.repositories import NotificationRepository


@dataclass(frozen=True)
class NotificationCounts:
    """Totals shown next to the notification bell."""

    total: int
    unread: int


def resolve_page_limit(limit: int | None) -> int:
    """Apply the configured default and upper bound to ``limit``."""

    settings = get_settings()
    if limit is None:
        return settings.notifications_default_page_size
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise PaginationValidationError("limit must be an integer")
    if limit <= 0:
        raise PaginationValidationError("limit must be a positive integer")
    return min(limit, settings.notifications_max_page_size)


def list_notifications(
    session: Session,
    recipient_id: str,
    *,
    limit: int | None = None,
    before: PageCursor | None = None,
) -> NotificationPage:
    """Return up to ``limit`` records older than ``before``, newest first.

    ``has_more`` is true when the page is full; there is no lookahead, so a
    page that ends exactly at the last record still reports ``True`` and the
    following request returns an empty page.
    """

    effective_limit = resolve_page_limit(limit)
    records = list(
        NotificationRepository(session).list_page(
            recipient_id, limit=effective_limit, before=before
        )
    )
    next_cursor = PageCursor.from_notification(records[-1]) if records else None
    return NotificationPage(
        records=records,
        next_cursor=next_cursor,
        has_more=len(records) == effective_limit,
    )


def count_notifications(session: Session, recipient_id: str) -> NotificationCounts:
    total, unread = NotificationRepository(session).count_for_recipient(recipient_id)
    return NotificationCounts(total=total, unread=unread)


__all__ = [
    "NotificationCounts",
    "count_notifications",
    "list_notifications",
    "resolve_page_limit",
]
