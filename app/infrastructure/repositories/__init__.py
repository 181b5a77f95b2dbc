"""Repository implementations for infrastructure layer."""

from .notification_preferences_repository import NotificationPreferencesRepository
from .notification_repository import NotificationRepository

__all__ = [
    "NotificationPreferencesRepository",
    "NotificationRepository",
]
