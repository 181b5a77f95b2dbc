"""Endpoints for reading and merge-updating notification preferences."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.notification_preferences import (
    get_notification_preferences as get_notification_preferences_uc,
    update_notification_preferences as update_notification_preferences_uc,
)
from app.domain.entities import NotificationPreferences
from app.domain.exceptions import NotificationError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_recipient_id
from app.interfaces.api.routes_helpers import http_error_from
from app.interfaces.api.schemas import (
    NotificationPreferencesRead,
    NotificationPreferencesUpdate,
)

router = APIRouter(prefix="/notification-preferences", tags=["notification-preferences"])


def _to_read_model(preferences: NotificationPreferences) -> NotificationPreferencesRead:
    return NotificationPreferencesRead(
        user_id=preferences.user_id,
        settings=dict(preferences.settings),
        updated_at=preferences.updated_at,
    )


@router.get("", response_model=NotificationPreferencesRead)
def read_preferences(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_recipient_id),
) -> NotificationPreferencesRead:
    """Return the stored preferences; users without a row get the defaults."""

    try:
        preferences = get_notification_preferences_uc(db, user_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(preferences)


@router.patch("", response_model=NotificationPreferencesRead)
def update_preferences(
    payload: NotificationPreferencesUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_recipient_id),
) -> NotificationPreferencesRead:
    """Merge the submitted types into the stored preferences."""

    try:
        preferences = update_notification_preferences_uc(db, user_id, payload.root)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(preferences)
