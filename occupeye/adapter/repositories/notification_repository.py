from typing import List, Optional

from sqlmodel import col, func, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from occupeye.app.repositories.notification_repository import INotificationRepository
from occupeye.domain.entities import Notification, NotificationAudience


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        """Create a new notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def get_by_id(self, notification_id: str) -> Optional[Notification]:
        """Get notification by ID"""
        stmt = select(Notification).where(Notification.id == notification_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_for_user(
        self, user_id: str, audience: NotificationAudience
    ) -> List[Notification]:
        """Get a user's inbox, newest first"""
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id, Notification.audience == audience)
            .order_by(col(Notification.timestamp).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_unread(self, user_id: str, audience: NotificationAudience) -> int:
        """Count unread notifications in a user's inbox"""
        stmt = (
            select(func.count())
            .select_from(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.audience == audience,
                Notification.read == False,  # noqa: E712
            )
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def mark_all_read(self, user_id: str, audience: NotificationAudience) -> int:
        """Mark every unread notification in a user's inbox as read"""
        stmt = (
            update(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.audience == audience,
                Notification.read == False,  # noqa: E712
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def update(self, notification: Notification) -> Notification:
        """Update existing notification"""
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def delete(self, notification: Notification) -> None:
        """Delete a notification"""
        await self.session.delete(notification)
        await self.session.flush()
