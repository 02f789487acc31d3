from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from occupeye.app.repositories.user_repository import IUserRepository
from occupeye.domain.entities import User, UserRole


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_rfid_card(self, rfid_card: str) -> Optional[User]:
        """Get user whose RFID card exactly matches the scanned value"""
        stmt = select(User).where(User.rfid_card == rfid_card)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_student_ids(self, student_ids: List[str]) -> List[User]:
        """Get all users whose student_id is in the given list"""
        if not student_ids:
            return []
        stmt = select(User).where(col(User.student_id).in_(student_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_ids(self, user_ids: List[str]) -> List[User]:
        """Get all users whose id is in the given list"""
        if not user_ids:
            return []
        stmt = select(User).where(col(User.id).in_(user_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_role(self, role: UserRole) -> List[User]:
        """Get all users with the given role"""
        stmt = select(User).where(User.role == role)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_highest_student_id(self, prefix: str) -> Optional[str]:
        """Get the highest student_id starting with prefix"""
        stmt = (
            select(User.student_id)
            .where(col(User.student_id).startswith(prefix))
            .order_by(col(User.student_id).desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_manager_ids(self) -> List[str]:
        """Get manager_id of every manager that has one"""
        stmt = select(User.manager_id).where(
            User.role == UserRole.manager, col(User.manager_id).is_not(None)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
