"""
Notification Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional, Union

from occupeye.app.use_cases.dtos import CamelModel
from occupeye.domain.entities import NotificationPriority


class NotificationInfo(CamelModel):
    """Single notification in an inbox"""

    id: str
    type: str
    title: str
    message: str
    priority: Optional[NotificationPriority] = None
    action: Optional[str] = None
    read: bool
    timestamp: datetime
    related_user_id: Optional[str] = None
    related_user_name: Optional[str] = None
    related_room_id: Optional[str] = None
    related_room_name: Optional[str] = None


class NotificationsResponse(CamelModel):
    """Response for get notifications use case"""

    notifications: List[NotificationInfo]


class UnreadCountResponse(CamelModel):
    """Response for get unread count use case"""

    count: int


class NotificationUpdatedResponse(CamelModel):
    """Response for mark read/unread, mark all read and delete use cases"""

    success: bool = True
    updated: int = 1


class SendNotificationResponse(CamelModel):
    """
    Response for send notification use case.

    id is the created notification's id for single recipients and True for
    fan-out deliveries.
    """

    success: bool = True
    id: Union[str, bool]
