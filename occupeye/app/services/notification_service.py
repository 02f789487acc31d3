"""
Notification Service

Creates notifications in student, manager and admin inboxes, including
fan-out to every manager, to the managers of one building and to every
admin. It is also the notifier used by the access event recorder.

Delivery is best effort: each public method commits its own writes and,
on failure, logs, rolls back and returns None/False instead of raising.
Callers must already be inside ``async with uow``.
"""

import logging
from datetime import UTC, datetime, timedelta, timezone
from typing import Iterable, List, Optional

from occupeye.app.services.notifier import INotifier
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import (
    Notification,
    NotificationAudience,
    NotificationPriority,
    User,
    UserRole,
)

logger = logging.getLogger(__name__)

STUDENT_NOTIFICATION_TYPES = ("success", "warning", "info")
MANAGER_NOTIFICATION_TYPES = ("approval", "occupancy", "system", "announcement")
ADMIN_NOTIFICATION_TYPES = ("new_user", "room_assignment", "system", "announcement")

HIGH_OCCUPANCY_THRESHOLD = 90


class NotificationService(INotifier):
    def __init__(self, uow: UnitOfWork, utc_offset_hours: int = 8):
        self.uow = uow
        self.local_tz = timezone(timedelta(hours=utc_offset_hours))

    # ------------------------------------------------------------------
    # Single recipient
    # ------------------------------------------------------------------

    async def create_student_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        type: str,
        action: Optional[str] = None,
    ) -> Optional[str]:
        notification = Notification(
            user_id=user_id,
            audience=NotificationAudience.student,
            type=type,
            title=title,
            message=message,
            action=action,
        )
        return await self._deliver_one(notification, "student")

    async def create_manager_notification(
        self,
        user_id: str,
        title: str,
        message: str,
        type: str,
        priority: NotificationPriority = NotificationPriority.normal,
    ) -> Optional[str]:
        notification = self._manager_notification(user_id, title, message, type, priority)
        return await self._deliver_one(notification, "manager")

    async def notify_rfid_access(
        self, user_id: str, action: str, room_name: str, building_name: str
    ) -> Optional[str]:
        local_time = datetime.now(UTC).astimezone(self.local_tz).strftime("%I:%M:%S %p")
        verb = "entered" if action == "entry" else "exited"
        return await self.create_student_notification(
            user_id,
            f"Room {'Entry' if action == 'entry' else 'Exit'} Recorded",
            f"You have {verb} {room_name} in {building_name} at {local_time}.",
            "info",
        )

    async def notify_reservation_approved(
        self,
        student_id: str,
        room_name: str,
        building_name: str,
        reservation_date: str,
        reservation_time: str,
        manager_name: str,
    ) -> Optional[str]:
        message = (
            f"Your reservation for {room_name} ({building_name}) on {reservation_date} "
            f"at {reservation_time} has been approved by {manager_name}."
        )
        return await self.create_student_notification(
            student_id, "Reservation Approved", message, "success", "View Reservation"
        )

    async def notify_reservation_rejected(
        self,
        student_id: str,
        room_name: str,
        building_name: str,
        reservation_date: str,
        reservation_time: str,
        manager_name: str,
        reason: str,
    ) -> Optional[str]:
        message = (
            f"Your reservation for {room_name} ({building_name}) on {reservation_date} "
            f"at {reservation_time} has been rejected by {manager_name}. Reason: {reason}"
        )
        return await self.create_student_notification(
            student_id, "Reservation Rejected", message, "warning", "Book Another Room"
        )

    # ------------------------------------------------------------------
    # Fan-out
    # ------------------------------------------------------------------

    async def notify_all_managers(
        self,
        title: str,
        message: str,
        type: str,
        priority: NotificationPriority = NotificationPriority.normal,
    ) -> bool:
        try:
            managers = await self.uow.users.get_by_role(UserRole.manager)
        except Exception:
            logger.exception("Error loading managers for notification fan-out")
            return False
        return await self._deliver_many(
            (self._manager_notification(m.id, title, message, type, priority) for m in managers),
            "all managers",
        )

    async def notify_building_managers(
        self,
        building_name: str,
        title: str,
        message: str,
        type: str,
        priority: NotificationPriority = NotificationPriority.normal,
    ) -> bool:
        try:
            managers = await self._building_managers(building_name)
        except Exception:
            logger.exception("Error loading managers of %s", building_name)
            return False
        return await self._deliver_many(
            (self._manager_notification(m.id, title, message, type, priority) for m in managers),
            f"managers of {building_name}",
        )

    async def create_reservation_request_notification(
        self,
        building_name: str,
        room_name: str,
        student_name: str,
        reservation_date: str,
        reservation_time: str,
        reservation_id: str,
    ) -> bool:
        message = (
            f"{student_name} has requested {room_name} in {building_name} for "
            f"{reservation_date} at {reservation_time}. Requires your approval."
        )
        logger.debug("Reservation %s requested for %s", reservation_id, room_name)
        return await self.notify_building_managers(
            building_name,
            "New Reservation Request",
            message,
            "approval",
            NotificationPriority.high,
        )

    async def notify_room_maintenance(
        self,
        building_name: str,
        room_name: str,
        start_date: str,
        end_date: str,
        reason: str,
    ) -> bool:
        message = (
            f"{room_name} in {building_name} is scheduled for maintenance from "
            f"{start_date} to {end_date}. Reason: {reason}"
        )
        return await self.notify_building_managers(
            building_name, "Room Maintenance Scheduled", message, "system"
        )

    async def notify_high_occupancy(self, building_name: str, occupancy_percentage: float) -> bool:
        message = (
            f"{building_name} has reached {occupancy_percentage}% occupancy. "
            "Consider monitoring closely."
        )
        priority = (
            NotificationPriority.high
            if occupancy_percentage > HIGH_OCCUPANCY_THRESHOLD
            else NotificationPriority.normal
        )
        return await self.notify_building_managers(
            building_name, "High Occupancy Alert", message, "occupancy", priority
        )

    async def notify_admins_new_user(self, new_user: User) -> bool:
        try:
            admins = await self.uow.users.get_by_role(UserRole.admin)
        except Exception:
            logger.exception("Error loading admins for new user notification")
            return False
        message = f"{new_user.full_name} ({new_user.email}) has registered a new account."
        return await self._deliver_many(
            (
                Notification(
                    user_id=admin.id,
                    audience=NotificationAudience.admin,
                    type="new_user",
                    title="New User Registration",
                    message=message,
                    priority=NotificationPriority.normal,
                    related_user_id=new_user.id,
                    related_user_name=new_user.full_name,
                )
                for admin in admins
            ),
            "admins",
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _building_managers(self, building_name: str) -> List[User]:
        managers = await self.uow.users.get_by_role(UserRole.manager)
        return [m for m in managers if building_name in (m.managed_buildings or [])]

    @staticmethod
    def _manager_notification(
        user_id: str,
        title: str,
        message: str,
        type: str,
        priority: NotificationPriority,
    ) -> Notification:
        return Notification(
            user_id=user_id,
            audience=NotificationAudience.manager,
            type=type,
            title=title,
            message=message,
            priority=priority,
        )

    async def _deliver_one(self, notification: Notification, label: str) -> Optional[str]:
        try:
            created = await self.uow.notifications.create(notification)
            notification_id = created.id
            await self.uow.commit()
            return notification_id
        except Exception:
            logger.exception("Error creating %s notification", label)
            await self.uow.rollback()
            return None

    async def _deliver_many(self, notifications: Iterable[Notification], label: str) -> bool:
        try:
            count = 0
            for notification in notifications:
                await self.uow.notifications.create(notification)
                count += 1
            await self.uow.commit()
            logger.info("Notified %d recipient(s): %s", count, label)
            return True
        except Exception:
            logger.exception("Error notifying %s", label)
            await self.uow.rollback()
            return False
