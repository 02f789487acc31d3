"""
Update Notification Use Cases

Read state changes and deletion of notifications in the caller's inbox.
"""

from typing import Optional

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import Notification
from .dtos import NotificationUpdatedResponse
from .get_notifications_use_case import resolve_audience

NOT_FOUND = Error("NOTIFICATION_NOT_FOUND", "Notification not found")


async def _owned_notification(
    uow: UnitOfWork, notification_id: str, user_id: str
) -> Optional[Notification]:
    notification = await uow.notifications.get_by_id(notification_id)
    # Another user's notification is reported as missing
    if notification is None or notification.user_id != user_id:
        return None
    return notification


class MarkNotificationUseCase:
    """Mark one of the caller's notifications as read or unread"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, notification_id: str, read: bool = True
    ) -> Result[NotificationUpdatedResponse]:
        async with self.uow:
            notification = await _owned_notification(self.uow, notification_id, user_id)
            if notification is None:
                return Return.err(NOT_FOUND)

            notification.read = read
            await self.uow.notifications.update(notification)
            await self.uow.commit()

            return Return.ok(NotificationUpdatedResponse())


class MarkAllNotificationsReadUseCase:
    """Mark every unread notification in the caller's inbox as read"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, role: str) -> Result[NotificationUpdatedResponse]:
        audience, error = resolve_audience(role)
        if error:
            return Return.err(error)

        async with self.uow:
            updated = await self.uow.notifications.mark_all_read(user_id, audience)
            await self.uow.commit()

            return Return.ok(NotificationUpdatedResponse(updated=updated))


class DeleteNotificationUseCase:
    """Delete one of the caller's notifications"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, notification_id: str
    ) -> Result[NotificationUpdatedResponse]:
        async with self.uow:
            notification = await _owned_notification(self.uow, notification_id, user_id)
            if notification is None:
                return Return.err(NOT_FOUND)

            await self.uow.notifications.delete(notification)
            await self.uow.commit()

            return Return.ok(NotificationUpdatedResponse())
