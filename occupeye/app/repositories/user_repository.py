from abc import ABC, abstractmethod
from typing import List, Optional

from occupeye.domain.entities import User, UserRole


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_rfid_card(self, rfid_card: str) -> Optional[User]:
        """Get user whose RFID card exactly matches the scanned value"""
        pass

    @abstractmethod
    async def get_by_student_ids(self, student_ids: List[str]) -> List[User]:
        """Get all users whose student_id is in the given list"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: List[str]) -> List[User]:
        """Get all users whose id is in the given list"""
        pass

    @abstractmethod
    async def get_by_role(self, role: UserRole) -> List[User]:
        """Get all users with the given role"""
        pass

    @abstractmethod
    async def get_highest_student_id(self, prefix: str) -> Optional[str]:
        """Get the highest student_id starting with prefix"""
        pass

    @abstractmethod
    async def get_manager_ids(self) -> List[str]:
        """Get manager_id of every manager that has one"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass
