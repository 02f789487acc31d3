from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from occupeye.app.repositories.dorm_repository import IDormRepository
from occupeye.domain.entities import Dorm


class DormRepository(IDormRepository):
    """Dorm repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, dorm_id: str) -> Optional[Dorm]:
        """Get dorm by ID"""
        stmt = select(Dorm).where(Dorm.id == dorm_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Dorm]:
        """Get the first dorm whose name matches exactly"""
        stmt = select(Dorm).where(Dorm.name == name)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_all(self) -> List[Dorm]:
        """Get all dorms ordered by name"""
        stmt = select(Dorm).order_by(Dorm.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, dorm: Dorm) -> Dorm:
        """Create a new dorm"""
        self.session.add(dorm)
        await self.session.flush()
        await self.session.refresh(dorm)
        return dorm
