"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, case, func, or_
from sqlalchemy.orm import Session

from app.domain.entities import Notification, PageCursor, payload_from_raw
from app.domain.exceptions import NotificationNotFoundError
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .errors import storage_guard


class NotificationRepository:
    """Provide ledger operations for :class:`Notification` objects.

    Every query is scoped by ``recipient_id``; a record owned by somebody else
    behaves exactly like a missing one.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_page(
        self,
        recipient_id: str,
        *,
        limit: int,
        before: PageCursor | None = None,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.recipient_id == recipient_id
        )
        if before is not None:
            boundary = ensure_app_naive_datetime(before.created_at)
            if before.id is None:
                query = query.filter(NotificationModel.created_at < boundary)
            else:
                query = query.filter(
                    or_(
                        NotificationModel.created_at < boundary,
                        and_(
                            NotificationModel.created_at == boundary,
                            NotificationModel.id < before.id,
                        ),
                    )
                )
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        ).limit(limit)
        with storage_guard(self.session, "list notifications"):
            models = query.all()
        return [self._to_entity(model) for model in models]

    def count_for_recipient(self, recipient_id: str) -> tuple[int, int]:
        """Return ``(total, unread)`` for ``recipient_id``."""

        unread_expr = func.sum(case((NotificationModel.read.is_(False), 1), else_=0))
        query = self.session.query(
            func.count(NotificationModel.id), unread_expr
        ).filter(NotificationModel.recipient_id == recipient_id)
        with storage_guard(self.session, "count notifications"):
            total, unread = query.one()
        return int(total or 0), int(unread or 0)

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            recipient_id=notification.recipient_id,
            actor_id=notification.actor_id,
            type=notification.type,
            data=notification.data.to_raw(),
            read=False,
            link=notification.link,
            created_at=ensure_app_naive_datetime(
                notification.created_at or now_in_app_timezone()
            ),
        )
        with storage_guard(self.session, "create notification"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_read(self, notification_id: int, *, recipient_id: str) -> Notification:
        """Flip ``read`` on one owned record; re-marking is a no-op."""

        with storage_guard(self.session, "mark notification read"):
            self._owned(recipient_id).filter(
                NotificationModel.id == notification_id,
                NotificationModel.read.is_(False),
            ).update({NotificationModel.read: True}, synchronize_session=False)
            self.session.commit()
            model = (
                self._owned(recipient_id)
                .filter(NotificationModel.id == notification_id)
                .one_or_none()
            )
        if model is None:
            raise NotificationNotFoundError(notification_id)
        return self._to_entity(model)

    def mark_all_read(self, recipient_id: str) -> int:
        with storage_guard(self.session, "mark all notifications read"):
            updated = (
                self._owned(recipient_id)
                .filter(NotificationModel.read.is_(False))
                .update({NotificationModel.read: True}, synchronize_session=False)
            )
            self.session.commit()
        return int(updated or 0)

    def delete_read(self, recipient_id: str) -> int:
        """Remove the recipient's read records in a single statement."""

        with storage_guard(self.session, "delete read notifications"):
            deleted = (
                self._owned(recipient_id)
                .filter(NotificationModel.read.is_(True))
                .delete(synchronize_session=False)
            )
            self.session.commit()
        return int(deleted or 0)

    def _owned(self, recipient_id: str):
        return self.session.query(NotificationModel).filter(
            NotificationModel.recipient_id == recipient_id
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            type=model.type,
            data=payload_from_raw(model.data),
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
            link=model.link,
            actor_id=model.actor_id,
        )


__all__ = ["NotificationRepository"]
