from abc import ABC, abstractmethod
from typing import List, Optional

from occupeye.domain.entities import Dorm


class IDormRepository(ABC):
    """Dorm repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, dorm_id: str) -> Optional[Dorm]:
        """Get dorm by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Dorm]:
        """Get the first dorm whose name matches exactly"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Dorm]:
        """Get all dorms ordered by name"""
        pass

    @abstractmethod
    async def create(self, dorm: Dorm) -> Dorm:
        """Create a new dorm"""
        pass
