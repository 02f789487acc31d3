from abc import ABC, abstractmethod
from typing import List, Optional

from occupeye.domain.entities import Room


class IRoomRepository(ABC):
    """Room repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, room_id: str) -> Optional[Room]:
        """Get room by ID"""
        pass

    @abstractmethod
    async def list_rooms(self, dorm_id: Optional[str] = None) -> List[Room]:
        """Get all rooms, optionally restricted to one dorm"""
        pass

    @abstractmethod
    async def create(self, room: Room) -> Room:
        """Create a new room"""
        pass
