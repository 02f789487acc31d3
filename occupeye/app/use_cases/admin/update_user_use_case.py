"""
Update User Use Case

Administrative edit of an identity: profile, RFID card, housing
assignment, manager scope and status.
"""

from datetime import UTC, datetime

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.unit_of_work import UnitOfWork
from .dtos import UpdateUserCommand, UserInfo

# Columns that may be changed but never cleared
NON_NULLABLE_FIELDS = ("first_name", "last_name", "status", "managed_buildings")


class UpdateUserUseCase:
    """
    Use case for editing an identity.

    Business Rules:
    - Only fields present in the command are changed
    - Name, status and managed buildings cannot be set to null
    - RFID card must not belong to another user
    - last_updated is refreshed on every edit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, command: UpdateUserCommand) -> Result[UserInfo]:
        changes = command.model_dump(exclude_unset=True)

        cleared = [
            field for field in NON_NULLABLE_FIELDS if field in changes and changes[field] is None
        ]
        if cleared:
            return Return.err(
                Error("VALIDATION_ERROR", f"Fields cannot be null: {', '.join(cleared)}")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            rfid_card = changes.get("rfid_card")
            if rfid_card:
                holder = await self.uow.users.get_by_rfid_card(rfid_card)
                if holder is not None and holder.id != user.id:
                    return Return.err(
                        Error("RFID_CARD_IN_USE", "RFID card is already assigned to another user")
                    )

            for field, value in changes.items():
                setattr(user, field, value)
            user.last_updated = datetime.now(UTC)

            user = await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserInfo.model_validate(user))
