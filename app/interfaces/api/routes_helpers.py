"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from app.domain.entities import Notification
from app.domain.exceptions import (
    NotificationError,
    NotificationNotFoundError,
    PaginationValidationError,
    PreferencesValidationError,
    TransientStorageError,
    UnauthorizedError,
)
from app.interfaces.api.schemas import NotificationRead

_STATUS_BY_ERROR: tuple[tuple[type[NotificationError], int, str | None], ...] = (
    (NotificationNotFoundError, status.HTTP_404_NOT_FOUND, "Notification not found"),
    (PaginationValidationError, 422, None),
    (PreferencesValidationError, 422, None),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED, "Invalid credentials"),
    (TransientStorageError, status.HTTP_503_SERVICE_UNAVAILABLE, "Storage temporarily unavailable"),
)


def http_error_from(exc: NotificationError) -> HTTPException:
    """Translate a core error into the matching ``HTTPException``.

    Not-found messages never echo anything beyond the requested id.
    """

    for error_type, status_code, detail in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            headers = {"WWW-Authenticate": "Bearer"} if error_type is UnauthorizedError else None
            return HTTPException(
                status_code=status_code, detail=detail or str(exc), headers=headers
            )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Notification error",
    )


def notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        recipient_id=notification.recipient_id,
        type=notification.type,
        data=notification.data.to_raw(),
        read=notification.read,
        created_at=notification.created_at,
        link=notification.link,
        actor_id=notification.actor_id,
    )
