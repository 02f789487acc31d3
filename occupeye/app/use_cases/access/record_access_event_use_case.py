"""
Record Access Event Use Case

Turns one RFID scan into an access log entry and a user status change.
"""

import logging
from datetime import UTC, datetime
from typing import Optional

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.notifier import INotifier
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import (
    UNKNOWN_IDENTITY,
    AccessAction,
    RfidLog,
    User,
    UserStatus,
)
from .action_toggler import determine_next_action
from .context_resolver import AccessContext, AccessContextResolver
from .dtos import (
    AccessUserInfo,
    RecordAccessEventCommand,
    RecordAccessEventResponse,
    RfidLogInfo,
)

logger = logging.getLogger(__name__)


class RecordAccessEventUseCase:
    """
    Use case for recording an RFID scan.

    Business Rules:
    - rfid_value is required
    - Unknown cards are rejected; a denied entry is logged when the scan
      carries a room id
    - The action toggles against the identity's most recent entry/exit,
      defaulting to entry
    - The log entry is committed first and is authoritative; failure to
      update the user status or to notify is logged and does not fail
      the request
    """

    def __init__(self, uow: UnitOfWork, notifier: Optional[INotifier] = None):
        self.uow = uow
        self.notifier = notifier
        self.context_resolver = AccessContextResolver(uow)

    async def execute(
        self, command: RecordAccessEventCommand
    ) -> Result[RecordAccessEventResponse]:
        """
        Execute record access event use case.

        Args:
            command: Scanned RFID value with optional room and user references

        Returns:
            Result with RecordAccessEventResponse, or Error
            (VALIDATION_ERROR, RFID_NOT_FOUND)
        """
        if not command.rfid_value:
            return Return.err(Error("VALIDATION_ERROR", "RFID value is required"))

        async with self.uow:
            user = await self.uow.users.get_by_rfid_card(command.rfid_value)

            if user is None:
                if command.room_id:
                    await self._record_denied(command)
                logger.info("Access denied for unregistered RFID card")
                return Return.err(
                    Error("RFID_NOT_FOUND", "No user found with this RFID card")
                )

            identity_reference = user.identity_reference
            context = await self.context_resolver.resolve(user, command.room_id)
            action = await determine_next_action(self.uow.rfid_logs, identity_reference)

            log_entry = await self.uow.rfid_logs.create(
                self._build_log_entry(user, command, context, action)
            )
            await self.uow.commit()

            # Snapshot everything the response and notifier need before the
            # status update, which may roll the session back
            response = RecordAccessEventResponse(
                user=AccessUserInfo(
                    id=user.id,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    student_id=user.student_id,
                    rfid_card=user.rfid_card,
                    role=user.role.value,
                    status=action.value,
                ),
                room=context.room,
                log_entry=RfidLogInfo.model_validate(log_entry),
            )
            user_id = user.id
            room_name = command.room_id or user.assigned_room or "Unknown"
            building_name = user.assigned_building or "Unknown Building"

            await self._update_user_status(user, action)
            await self._notify(user_id, action, room_name, building_name)

            logger.info("Recorded %s for %s", action.value, identity_reference)
            return Return.ok(response)

    async def _record_denied(self, command: RecordAccessEventCommand) -> None:
        await self.uow.rfid_logs.create(
            RfidLog(
                student_id=UNKNOWN_IDENTITY,
                student_name=UNKNOWN_IDENTITY,
                room=command.room_id,
                action=AccessAction.denied,
                timestamp=datetime.now(UTC),
                user_id=command.user_id,
            )
        )
        await self.uow.commit()

    @staticmethod
    def _build_log_entry(
        user: User,
        command: RecordAccessEventCommand,
        context: AccessContext,
        action: AccessAction,
    ) -> RfidLog:
        return RfidLog(
            student_id=user.identity_reference,
            student_name=user.full_name,
            room=command.room_id or user.assigned_room or "Unknown",
            building=user.assigned_building,
            dorm_id=context.dorm_id or user.managed_dorm_id,
            dorm_name=context.dorm_name or user.assigned_building,
            action=action,
            timestamp=datetime.now(UTC),
            user_assigned_room=user.assigned_room,
            user_assigned_building=user.assigned_building,
            user_room_application_status=user.room_application_status,
            user_id=command.user_id or user.id,
        )

    async def _update_user_status(self, user: User, action: AccessAction) -> None:
        user_id = user.id
        try:
            user.status = UserStatus(action.value)
            user.last_updated = datetime.now(UTC)
            await self.uow.users.update(user)
            await self.uow.commit()
        except Exception:
            logger.exception("Error updating user %s status to %s", user_id, action.value)
            await self.uow.rollback()

    async def _notify(
        self, user_id: str, action: AccessAction, room_name: str, building_name: str
    ) -> None:
        if self.notifier is None:
            return
        try:
            notification_id = await self.notifier.notify_rfid_access(
                user_id, action.value, room_name, building_name
            )
            if notification_id is None:
                logger.warning("RFID access notification for %s was not delivered", user_id)
        except Exception:
            logger.exception("Error sending RFID notification to %s", user_id)
