"""
Room Use Cases

Creation and listing of rooms.
"""

from typing import Optional

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.app.use_cases.access.dtos import RoomInfo
from occupeye.domain.entities import Room
from .dtos import CreateRoomCommand, RoomListResponse


class CreateRoomUseCase:
    """
    Use case for creating a room.

    Business Rules:
    - dorm_id, when given, must name an existing dorm
    - building defaults to the dorm's name
    - An explicit id may be supplied (it is what readers send as roomId),
      and must be unused
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateRoomCommand) -> Result[RoomInfo]:
        async with self.uow:
            if command.id and await self.uow.rooms.get_by_id(command.id):
                return Return.err(Error("ROOM_ALREADY_EXISTS", "A room with this id exists"))

            building = command.building
            if command.dorm_id:
                dorm = await self.uow.dorms.get_by_id(command.dorm_id)
                if dorm is None:
                    return Return.err(Error("DORM_NOT_FOUND", "Dorm not found"))
                building = building or dorm.name

            fields = command.model_dump(exclude_none=True)
            fields["building"] = building or ""
            room = await self.uow.rooms.create(Room(**fields))
            await self.uow.commit()

            return Return.ok(RoomInfo.model_validate(room))


class ListRoomsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, dorm_id: Optional[str] = None) -> Result[RoomListResponse]:
        async with self.uow:
            rooms = await self.uow.rooms.list_rooms(dorm_id)
            return Return.ok(RoomListResponse(rooms=[RoomInfo.model_validate(r) for r in rooms]))
