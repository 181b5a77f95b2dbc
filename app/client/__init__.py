"""Client-side notification cache: the bell overlay and the notification center feed."""

from .api import (
    NotificationsApiClient,
    NotificationsClientError,
    NotificationsNotFound,
    NotificationsUnauthorized,
    RemotePage,
)
from .cache import NotificationCache
from .feed import NotificationFeed
from .local_store import LocalNotificationStore
from .models import ClientNotification
from .overlay import NotificationOverlay
from .rendering import NotificationView, shape_notification, time_ago

__all__ = [
    "NotificationsApiClient",
    "NotificationsClientError",
    "NotificationsNotFound",
    "NotificationsUnauthorized",
    "RemotePage",
    "NotificationCache",
    "NotificationFeed",
    "LocalNotificationStore",
    "ClientNotification",
    "NotificationOverlay",
    "NotificationView",
    "shape_notification",
    "time_ago",
]
