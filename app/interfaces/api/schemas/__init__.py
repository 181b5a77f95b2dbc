from .notification import (
    DeleteReadResponse,
    MarkAllReadResponse,
    NotificationCountRead,
    NotificationCreate,
    NotificationCreateResponse,
    NotificationListResponse,
    NotificationRead,
)
from .notification_preferences import (
    NotificationPreferencesRead,
    NotificationPreferencesUpdate,
)

__all__ = [
    "DeleteReadResponse",
    "MarkAllReadResponse",
    "NotificationCountRead",
    "NotificationCreate",
    "NotificationCreateResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationPreferencesRead",
    "NotificationPreferencesUpdate",
]
