"""Use cases for managing notification preferences."""

from .get_notification_preferences import get_notification_preferences
from .update_notification_preferences import update_notification_preferences

__all__ = [
    "get_notification_preferences",
    "update_notification_preferences",
]
