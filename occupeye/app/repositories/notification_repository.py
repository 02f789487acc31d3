from abc import ABC, abstractmethod
from typing import List, Optional

from occupeye.domain.entities import Notification, NotificationAudience


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        pass

    @abstractmethod
    async def get_by_id(self, notification_id: str) -> Optional[Notification]:
        """Get notification by ID"""
        pass

    @abstractmethod
    async def get_for_user(
        self, user_id: str, audience: NotificationAudience
    ) -> List[Notification]:
        """Get a user's inbox, newest first"""
        pass

    @abstractmethod
    async def count_unread(self, user_id: str, audience: NotificationAudience) -> int:
        """Count unread notifications in a user's inbox"""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: str, audience: NotificationAudience) -> int:
        """Mark every unread notification in a user's inbox as read, return count"""
        pass

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        """Update existing notification"""
        pass

    @abstractmethod
    async def delete(self, notification: Notification) -> None:
        """Delete a notification"""
        pass
