"""Errors raised by the notification core."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for notification subsystem failures."""


class NotificationNotFoundError(NotificationError):
    """The record does not exist for the requesting recipient."""

    def __init__(self, notification_id: int) -> None:
        super().__init__(f"Notification {notification_id} not found")
        self.notification_id = notification_id


class PaginationValidationError(NotificationError, ValueError):
    """Malformed pagination parameters (limit or cursor)."""


class PreferencesValidationError(NotificationError, ValueError):
    """Malformed preference settings."""


class UnauthorizedError(NotificationError):
    """No recipient could be resolved for the request."""


class TransientStorageError(NotificationError):
    """The backing store is temporarily unavailable."""


__all__ = [
    "NotificationError",
    "NotificationNotFoundError",
    "PaginationValidationError",
    "PreferencesValidationError",
    "UnauthorizedError",
    "TransientStorageError",
]
