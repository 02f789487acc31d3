"""
Notification Use Cases

Inbox queries, read state changes and notification dispatch.
"""

from .get_notifications_use_case import (
    GetNotificationsUseCase,
    GetUnreadCountUseCase,
    resolve_audience,
)
from .update_notification_use_case import (
    MarkNotificationUseCase,
    MarkAllNotificationsReadUseCase,
    DeleteNotificationUseCase,
)
from .send_notification_use_case import SendNotificationUseCase
from .dtos import (
    NotificationInfo,
    NotificationsResponse,
    UnreadCountResponse,
    NotificationUpdatedResponse,
    SendNotificationResponse,
)

__all__ = [
    # Use Cases
    "GetNotificationsUseCase",
    "GetUnreadCountUseCase",
    "MarkNotificationUseCase",
    "MarkAllNotificationsReadUseCase",
    "DeleteNotificationUseCase",
    "SendNotificationUseCase",
    "resolve_audience",
    # DTOs
    "NotificationInfo",
    "NotificationsResponse",
    "UnreadCountResponse",
    "NotificationUpdatedResponse",
    "SendNotificationResponse",
]
