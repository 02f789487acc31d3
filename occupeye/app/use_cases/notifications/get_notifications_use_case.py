"""
Get Notifications Use Case

Pull-based inbox queries for the current user.
"""

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import NotificationAudience
from .dtos import NotificationInfo, NotificationsResponse, UnreadCountResponse


def resolve_audience(role: str):
    try:
        return NotificationAudience.for_role(role), None
    except ValueError:
        return None, Error("INVALID_ROLE", f"No notification inbox for role: {role}")


class GetNotificationsUseCase:
    """List the caller's notifications, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, role: str) -> Result[NotificationsResponse]:
        audience, error = resolve_audience(role)
        if error:
            return Return.err(error)

        async with self.uow:
            notifications = await self.uow.notifications.get_for_user(user_id, audience)
            return Return.ok(
                NotificationsResponse(
                    notifications=[NotificationInfo.model_validate(n) for n in notifications]
                )
            )


class GetUnreadCountUseCase:
    """Count the caller's unread notifications"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, role: str) -> Result[UnreadCountResponse]:
        audience, error = resolve_audience(role)
        if error:
            return Return.err(error)

        async with self.uow:
            count = await self.uow.notifications.count_unread(user_id, audience)
            return Return.ok(UnreadCountResponse(count=count))
