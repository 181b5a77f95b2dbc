"""Use cases for the notification ledger."""

from .create_notification import create_notification, notify, notify_many
from .list_notifications import (
    NotificationCounts,
    count_notifications,
    list_notifications,
    resolve_page_limit,
)
from .read_state import (
    delete_read_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "create_notification",
    "notify",
    "notify_many",
    "NotificationCounts",
    "count_notifications",
    "list_notifications",
    "resolve_page_limit",
    "delete_read_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
