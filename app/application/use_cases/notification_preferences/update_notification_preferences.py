"""Use case for merge-updating a user's notification preferences."""

from collections.abc import Mapping

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreferences
from app.domain.exceptions import PreferencesValidationError
from app.infrastructure.repositories import NotificationPreferencesRepository

_MAX_TYPE_LENGTH = 64


def _validate_partial(partial: Mapping[str, object]) -> dict[str, bool]:
    validated: dict[str, bool] = {}
    for notification_type, enabled in partial.items():
        if not isinstance(notification_type, str) or not notification_type.strip():
            raise PreferencesValidationError("Notification type must be a non-empty string")
        if len(notification_type) > _MAX_TYPE_LENGTH:
            raise PreferencesValidationError(
                f"Notification type '{notification_type[:16]}...' is too long"
            )
        if not isinstance(enabled, bool):
            raise PreferencesValidationError(
                f"Setting for '{notification_type}' must be a boolean"
            )
        validated[notification_type.strip()] = enabled
    return validated


def update_notification_preferences(
    session: Session,
    user_id: str,
    partial: Mapping[str, object],
) -> NotificationPreferences:
    """Merge ``partial`` into the stored settings; types not mentioned keep their value."""

    validated = _validate_partial(partial)
    repository = NotificationPreferencesRepository(session)
    if not validated:
        stored = repository.get(user_id)
        return stored or NotificationPreferences(user_id=user_id, settings={})
    return repository.merge(user_id, validated)
