"""Create notifications behind the recipient's preferences gate."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from app.application.use_cases.notification_preferences import (
    get_notification_preferences,
)
from app.domain.entities import Notification, payload_from_raw
from app.domain.exceptions import TransientStorageError
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    recipient_id: str,
    notification_type: str,
    data: Any = None,
    link: str | None = None,
    actor_id: str | None = None,
) -> Notification | None:
    """Insert an unread notification unless the recipient disabled ``notification_type``.

    A disabled type is not an error: nothing is written and ``None`` is
    returned. Storage failures propagate.
    """

    preferences = get_notification_preferences(session, recipient_id)
    if not preferences.allows(notification_type):
        logger.debug(
            "Skipping '%s' notification for %s: disabled in preferences",
            notification_type,
            recipient_id,
        )
        return None

    notification = Notification(
        id=None,
        recipient_id=recipient_id,
        type=notification_type,
        data=payload_from_raw(data),
        read=False,
        created_at=now_in_app_timezone(),
        link=link,
        actor_id=actor_id,
    )
    return NotificationRepository(session).create(notification)


def notify(
    session: Session,
    recipient_id: str | None,
    notification_type: str | None,
    *,
    data: Any = None,
    link: str | None = None,
    actor_id: str | None = None,
) -> Notification | None:
    """Producer-side helper that never raises.

    Producers (event updates, group actions, reminders) call this from
    flows whose outcome must not depend on notification delivery.
    """

    if not recipient_id or not notification_type:
        return None
    try:
        return create_notification(
            session,
            recipient_id=str(recipient_id),
            notification_type=notification_type,
            data=data,
            link=link,
            actor_id=actor_id,
        )
    except TransientStorageError:
        logger.warning(
            "notify() failed for %s (%s); notification dropped",
            recipient_id,
            notification_type,
        )
        return None


def notify_many(
    session: Session,
    recipient_ids: Iterable[str | None],
    notification_type: str,
    *,
    data: Any = None,
    link: str | None = None,
    actor_id: str | None = None,
) -> list[Notification]:
    """Fan a notification out to several recipients, each gated individually."""

    created: list[Notification] = []
    seen: set[str] = set()
    for recipient_id in recipient_ids:
        if not recipient_id or str(recipient_id) in seen:
            continue
        seen.add(str(recipient_id))
        notification = notify(
            session,
            str(recipient_id),
            notification_type,
            data=data,
            link=link,
            actor_id=actor_id,
        )
        if notification is not None:
            created.append(notification)
    return created


__all__ = ["create_notification", "notify", "notify_many"]
