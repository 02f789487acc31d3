"""
Create User Use Case

Registers a new identity (student, manager or admin).
"""

import logging
from datetime import UTC, datetime
from typing import Optional

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.notification_service import NotificationService
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import User, UserRole
from .dtos import CreateUserCommand, CreateUserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for registering an identity.

    Business Rules:
    - Email must be unique
    - RFID card, when given, must not belong to another user
    - Students without a student id get YYYY + 3-digit sequence (2024001, ...)
    - Managers without a manager id get the next 5-digit number (00001, ...)
    - Every admin is notified of the registration; notification failures
      do not fail the request
    """

    def __init__(
        self, uow: UnitOfWork, notification_service: Optional[NotificationService] = None
    ):
        self.uow = uow
        self.notification_service = notification_service

    async def execute(self, command: CreateUserCommand) -> Result[CreateUserResponse]:
        async with self.uow:
            if await self.uow.users.get_by_email(command.email):
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already registered"))

            if command.rfid_card and await self.uow.users.get_by_rfid_card(command.rfid_card):
                return Return.err(
                    Error("RFID_CARD_IN_USE", "RFID card is already assigned to another user")
                )

            student_id = command.student_id
            if command.role == UserRole.student and not student_id:
                student_id = await self._generate_student_id()

            manager_id = command.manager_id
            if command.role == UserRole.manager and not manager_id:
                manager_id = await self._generate_manager_id()

            user = User(
                first_name=command.first_name,
                last_name=command.last_name,
                email=command.email,
                role=command.role,
                contact_number=command.contact_number,
                rfid_card=command.rfid_card,
                student_id=student_id,
                manager_id=manager_id,
                assigned_room=command.assigned_room,
                assigned_building=command.assigned_building,
                managed_dorm_id=command.managed_dorm_id,
                managed_buildings=list(command.managed_buildings),
            )
            user = await self.uow.users.create(user)
            await self.uow.commit()

            response = CreateUserResponse(
                user_id=user.id, student_id=user.student_id, manager_id=user.manager_id
            )
            logger.info("Created %s %s", user.role.value, user.id)

            if self.notification_service is not None:
                await self.notification_service.notify_admins_new_user(user)

            return Return.ok(response)

    async def _generate_student_id(self) -> str:
        year = str(datetime.now(UTC).year)
        sequence = 1

        highest = await self.uow.users.get_highest_student_id(year)
        if highest:
            try:
                sequence = int(highest[len(year):]) + 1
            except ValueError:
                logger.warning("Unparseable student id %s, restarting sequence", highest)

        return f"{year}{sequence:03d}"

    async def _generate_manager_id(self) -> str:
        highest = 0
        for manager_id in await self.uow.users.get_manager_ids():
            if manager_id.isdigit():
                highest = max(highest, int(manager_id))
        return f"{highest + 1:05d}"
