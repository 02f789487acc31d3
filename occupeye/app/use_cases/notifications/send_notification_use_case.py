"""
Send Notification Use Case

Dispatches a typed notification request to the notification service.
"""

from typing import Any, Awaitable, Callable, Dict, Tuple

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.notification_service import (
    MANAGER_NOTIFICATION_TYPES,
    STUDENT_NOTIFICATION_TYPES,
    NotificationService,
)
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import NotificationPriority
from .dtos import SendNotificationResponse

# type -> request keys that must be present (camelCase, as sent on the wire)
REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
    "student": ("userId", "title", "message", "notificationType"),
    "manager": ("userId", "title", "message", "notificationType"),
    "all_managers": ("title", "message", "notificationType"),
    "building_managers": ("buildingName", "title", "message", "notificationType"),
    "reservation_request": (
        "buildingName",
        "roomName",
        "studentName",
        "reservationDate",
        "reservationTime",
        "reservationId",
    ),
    "reservation_approved": (
        "studentId",
        "roomName",
        "buildingName",
        "reservationDate",
        "reservationTime",
        "managerName",
    ),
    "reservation_rejected": (
        "studentId",
        "roomName",
        "buildingName",
        "reservationDate",
        "reservationTime",
        "managerName",
        "reason",
    ),
    "room_maintenance": ("buildingName", "roomName", "startDate", "endDate", "reason"),
    "high_occupancy": ("buildingName", "occupancyPercentage"),
    "rfid_access": ("studentId", "action", "roomName", "buildingName"),
}

MANAGER_TYPES = ("manager", "all_managers", "building_managers")


class SendNotificationUseCase:
    """
    Use case for creating notifications on behalf of other services.

    Business Rules:
    - type selects the template and the recipients
    - Every field listed in REQUIRED_FIELDS for the type must be present
    - notificationType must be valid for the recipient audience
    - priority, when given, must be high/normal/low for every type;
      it defaults to normal and only manager notifications store it
    """

    def __init__(self, uow: UnitOfWork, notification_service: NotificationService):
        self.uow = uow
        self.notifications = notification_service

    async def execute(
        self, type: str, data: Dict[str, Any]
    ) -> Result[SendNotificationResponse]:
        """
        Execute send notification use case.

        Args:
            type: Notification request type (see REQUIRED_FIELDS)
            data: Remaining request fields

        Returns:
            Result with SendNotificationResponse, or Error
            (INVALID_NOTIFICATION_TYPE, VALIDATION_ERROR, NOTIFICATION_FAILED)
        """
        if type not in REQUIRED_FIELDS:
            return Return.err(
                Error("INVALID_NOTIFICATION_TYPE", "Invalid notification type")
            )

        missing = [key for key in REQUIRED_FIELDS[type] if data.get(key) in (None, "")]
        if missing:
            return Return.err(
                Error("VALIDATION_ERROR", f"Missing required fields: {', '.join(missing)}")
            )

        error = self._validate(type, data)
        if error:
            return Return.err(error)

        async with self.uow:
            result = await self._dispatch(type, data)()

        if not result:
            return Return.err(Error("NOTIFICATION_FAILED", "Failed to create notification"))

        return Return.ok(SendNotificationResponse(id=result))

    @staticmethod
    def _validate(type: str, data: Dict[str, Any]):
        notification_type = data.get("notificationType")
        if type == "student" and notification_type not in STUDENT_NOTIFICATION_TYPES:
            return Error("VALIDATION_ERROR", f"Invalid student notification type: {notification_type}")
        if type in MANAGER_TYPES and notification_type not in MANAGER_NOTIFICATION_TYPES:
            return Error("VALIDATION_ERROR", f"Invalid manager notification type: {notification_type}")

        try:
            NotificationPriority(data.get("priority") or "normal")
        except ValueError:
            return Error("VALIDATION_ERROR", f"Invalid priority: {data.get('priority')}")

        if type == "rfid_access" and data["action"] not in ("entry", "exit"):
            return Error("VALIDATION_ERROR", "action must be entry or exit")

        if type == "high_occupancy":
            try:
                float(data["occupancyPercentage"])
            except (TypeError, ValueError):
                return Error("VALIDATION_ERROR", "occupancyPercentage must be a number")

        return None

    def _dispatch(self, type: str, data: Dict[str, Any]) -> Callable[[], Awaitable[Any]]:
        service = self.notifications
        priority = NotificationPriority(data.get("priority") or "normal")

        handlers: Dict[str, Callable[[], Awaitable[Any]]] = {
            "student": lambda: service.create_student_notification(
                data["userId"],
                data["title"],
                data["message"],
                data["notificationType"],
                data.get("action"),
            ),
            "manager": lambda: service.create_manager_notification(
                data["userId"], data["title"], data["message"], data["notificationType"], priority
            ),
            "all_managers": lambda: service.notify_all_managers(
                data["title"], data["message"], data["notificationType"], priority
            ),
            "building_managers": lambda: service.notify_building_managers(
                data["buildingName"],
                data["title"],
                data["message"],
                data["notificationType"],
                priority,
            ),
            "reservation_request": lambda: service.create_reservation_request_notification(
                data["buildingName"],
                data["roomName"],
                data["studentName"],
                data["reservationDate"],
                data["reservationTime"],
                data["reservationId"],
            ),
            "reservation_approved": lambda: service.notify_reservation_approved(
                data["studentId"],
                data["roomName"],
                data["buildingName"],
                data["reservationDate"],
                data["reservationTime"],
                data["managerName"],
            ),
            "reservation_rejected": lambda: service.notify_reservation_rejected(
                data["studentId"],
                data["roomName"],
                data["buildingName"],
                data["reservationDate"],
                data["reservationTime"],
                data["managerName"],
                data["reason"],
            ),
            "room_maintenance": lambda: service.notify_room_maintenance(
                data["buildingName"],
                data["roomName"],
                data["startDate"],
                data["endDate"],
                data["reason"],
            ),
            "high_occupancy": lambda: service.notify_high_occupancy(
                data["buildingName"], float(data["occupancyPercentage"])
            ),
            "rfid_access": lambda: service.notify_rfid_access(
                data["studentId"], data["action"], data["roomName"], data["buildingName"]
            ),
        }
        return handlers[type]
