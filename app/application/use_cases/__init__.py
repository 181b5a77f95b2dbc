"""Aggregate application use cases."""

from .notification_preferences import (
    get_notification_preferences,
    update_notification_preferences,
)
from .notifications import (
    create_notification,
    delete_read_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    notify,
    notify_many,
)

__all__ = [
    "get_notification_preferences",
    "update_notification_preferences",
    "create_notification",
    "delete_read_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify",
    "notify_many",
]
