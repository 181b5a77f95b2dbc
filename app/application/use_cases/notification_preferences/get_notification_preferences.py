"""Use case for reading a user's notification preferences."""

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreferences
from app.infrastructure.repositories import NotificationPreferencesRepository


def get_notification_preferences(session: Session, user_id: str) -> NotificationPreferences:
    """Return the stored preferences or an all-enabled default document."""

    stored = NotificationPreferencesRepository(session).get(user_id)
    if stored is None:
        return NotificationPreferences(user_id=user_id, settings={})
    return stored
