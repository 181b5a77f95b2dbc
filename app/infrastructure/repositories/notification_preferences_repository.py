"""Persistence helpers for notification preferences."""

from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreferences
from app.infrastructure.models import NotificationPreferencesModel
from app.utils import ensure_app_timezone

from .errors import storage_guard

_MERGE_ATTEMPTS = 2


class NotificationPreferencesRepository:
    """Read and merge-update the per-user preferences row."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> NotificationPreferences | None:
        with storage_guard(self.session, "load notification preferences"):
            model = self.session.get(NotificationPreferencesModel, user_id)
        return self._to_entity(model) if model else None

    def merge(self, user_id: str, partial: Mapping[str, bool]) -> NotificationPreferences:
        """Overwrite the types present in ``partial`` against the stored row.

        The row is re-read (and locked where the backend supports it) inside
        the same transaction, so concurrent merges only race per type key.
        """

        for attempt in range(_MERGE_ATTEMPTS):
            with storage_guard(self.session, "update notification preferences"):
                model = (
                    self.session.query(NotificationPreferencesModel)
                    .filter(NotificationPreferencesModel.user_id == user_id)
                    .with_for_update()
                    .one_or_none()
                )
                if model is None:
                    model = NotificationPreferencesModel(user_id=user_id, settings={})
                    self.session.add(model)
                current = NotificationPreferences(
                    user_id=user_id, settings=dict(model.settings or {})
                )
                # Reassign so the JSON column is flagged as modified.
                model.settings = current.merged(dict(partial)).settings
                try:
                    self.session.commit()
                except IntegrityError:
                    # Another request inserted the row first; merge against it.
                    self.session.rollback()
                    if attempt == _MERGE_ATTEMPTS - 1:
                        raise
                    continue
                self.session.refresh(model)
                return self._to_entity(model)
        raise RuntimeError("Preferences merge did not complete")  # pragma: no cover

    @staticmethod
    def _to_entity(model: NotificationPreferencesModel) -> NotificationPreferences:
        return NotificationPreferences(
            user_id=model.user_id,
            settings={key: bool(value) for key, value in (model.settings or {}).items()},
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationPreferencesRepository"]
