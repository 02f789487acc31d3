from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from occupeye.app.repositories.room_repository import IRoomRepository
from occupeye.domain.entities import Room


class RoomRepository(IRoomRepository):
    """Room repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, room_id: str) -> Optional[Room]:
        """Get room by ID"""
        stmt = select(Room).where(Room.id == room_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_rooms(self, dorm_id: Optional[str] = None) -> List[Room]:
        """Get all rooms, optionally restricted to one dorm"""
        stmt = select(Room)
        if dorm_id:
            stmt = stmt.where(Room.dorm_id == dorm_id)
        stmt = stmt.order_by(Room.building, Room.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, room: Room) -> Room:
        """Create a new room"""
        self.session.add(room)
        await self.session.flush()
        await self.session.refresh(room)
        return room
