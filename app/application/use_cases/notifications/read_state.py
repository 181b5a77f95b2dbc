"""Read-state transitions for a recipient's ledger.

``read`` only ever moves from ``False`` to ``True``. Marking is idempotent,
and deletion only touches records that are already read when the delete
statement runs.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def mark_notification_read(
    session: Session, recipient_id: str, notification_id: int
) -> Notification:
    """Mark one owned record read; raises ``NotificationNotFoundError`` otherwise."""

    return NotificationRepository(session).mark_read(
        notification_id, recipient_id=recipient_id
    )


def mark_all_notifications_read(session: Session, recipient_id: str) -> int:
    """Return how many unread records were transitioned."""

    updated = NotificationRepository(session).mark_all_read(recipient_id)
    logger.debug("Marked %s notifications read for %s", updated, recipient_id)
    return updated


def delete_read_notifications(session: Session, recipient_id: str) -> int:
    """Permanently remove the recipient's read records; unread ones are kept."""

    deleted = NotificationRepository(session).delete_read(recipient_id)
    logger.debug("Deleted %s read notifications for %s", deleted, recipient_id)
    return deleted


__all__ = [
    "delete_read_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
