"""Domain entities exposed by the application."""

from .notification import (
    Notification,
    NotificationPayload,
    NotificationType,
    StructuredPayload,
    TextPayload,
    payload_from_raw,
)
from .notification_page import NotificationPage, PageCursor
from .notification_preferences import NotificationPreferences

__all__ = [
    "Notification",
    "NotificationPayload",
    "NotificationType",
    "StructuredPayload",
    "TextPayload",
    "payload_from_raw",
    "NotificationPage",
    "PageCursor",
    "NotificationPreferences",
]
