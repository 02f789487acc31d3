"""
Get Access Logs Use Case

Lists recent RFID access logs for the admin and manager log views.
"""

import logging
from datetime import UTC, datetime
from typing import Dict, List, Optional

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import UNKNOWN_IDENTITY, AccessAction, RfidLog, User, UserRole
from occupeye.domain.timestamps import format_display_timestamp
from .dtos import AccessLogItem, AccessLogsResponse

logger = logging.getLogger(__name__)


class GetAccessLogsUseCase:
    """
    Use case for browsing access logs.

    Business Rules:
    - Caller must have role=admin or role=manager
    - Logs ordered newest first, at most `limit` of them
    - Timestamps rendered as local wall time (YYYY-MM-DD HH:MM:SS)
    - Each log carries the owning user's current contact and housing data,
      looked up by student id and then by user id
    - dorm_name filter matches dorm_name or building, applied after the query
    """

    def __init__(self, uow: UnitOfWork, utc_offset_hours: int = 8):
        self.uow = uow
        self.utc_offset_hours = utc_offset_hours

    async def execute(
        self,
        role: str,
        student_id: Optional[str] = None,
        room: Optional[str] = None,
        action: Optional[str] = None,
        dorm_name: Optional[str] = None,
        limit: int = 100,
    ) -> Result[AccessLogsResponse]:
        if role not in (UserRole.admin.value, UserRole.manager.value):
            return Return.err(
                Error("INSUFFICIENT_ROLE", "You do not have permission to view access logs")
            )

        action_filter = None
        if action:
            try:
                action_filter = AccessAction(action)
            except ValueError:
                return Return.err(Error("VALIDATION_ERROR", f"Unknown action: {action}"))

        async with self.uow:
            logs = await self.uow.rfid_logs.get_recent(
                student_id=student_id, room=room, action=action_filter, limit=limit
            )
            users = await self._load_users(logs)

            items = [self._to_item(log, users.get(log.student_id)) for log in logs]

            if dorm_name:
                items = [
                    item
                    for item in items
                    if item.dorm_name == dorm_name or item.building == dorm_name
                ]

            return Return.ok(AccessLogsResponse(logs=items))

    async def _load_users(self, logs: List[RfidLog]) -> Dict[str, User]:
        references = {
            log.student_id for log in logs if log.student_id and log.student_id != UNKNOWN_IDENTITY
        }
        if not references:
            return {}

        users: Dict[str, User] = {}
        try:
            for user in await self.uow.users.get_by_student_ids(sorted(references)):
                users[user.student_id] = user

            # Older logs reference the user id directly
            missing = references - users.keys()
            for user in await self.uow.users.get_by_ids(sorted(missing)):
                users[user.id] = user
        except Exception:
            logger.warning("Error loading users for access logs", exc_info=True)

        return users

    def _to_item(self, log: RfidLog, user: Optional[User]) -> AccessLogItem:
        try:
            timestamp = format_display_timestamp(log.timestamp, self.utc_offset_hours)
        except ValueError:
            logger.warning("Invalid timestamp on access log %s", log.id)
            timestamp = format_display_timestamp(datetime.now(UTC), self.utc_offset_hours)

        return AccessLogItem(
            id=log.id,
            student_id=log.student_id or "",
            student_name=log.student_name or "",
            room=log.room or "",
            building=log.building,
            dorm_id=log.dorm_id or "",
            dorm_name=log.dorm_name or "",
            action=AccessAction(log.action).value,
            timestamp=timestamp,
            user_id=log.user_id,
            contact_number=user.contact_number if user else None,
            assigned_room=(user.assigned_room if user else None) or "",
            assigned_building=(user.assigned_building if user else None) or "",
            room_application_status=(user.room_application_status if user else None) or "",
            user_assigned_room=log.user_assigned_room,
            user_assigned_building=log.user_assigned_building,
            user_room_application_status=log.user_room_application_status,
        )
