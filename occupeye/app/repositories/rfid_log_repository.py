from abc import ABC, abstractmethod
from typing import List, Optional

from occupeye.domain.entities import AccessAction, RfidLog


class IRfidLogRepository(ABC):
    """RfidLog repository interface - application layer"""

    @abstractmethod
    async def create(self, log: RfidLog) -> RfidLog:
        """Append a new access log entry (immutable)"""
        pass

    @abstractmethod
    async def get_by_student_id(self, student_id: str) -> List[RfidLog]:
        """
        Get every log entry recorded for an identity reference.

        No ordering is guaranteed; callers sort by normalized timestamp.
        """
        pass

    @abstractmethod
    async def get_recent(
        self,
        student_id: Optional[str] = None,
        room: Optional[str] = None,
        action: Optional[AccessAction] = None,
        limit: int = 100,
    ) -> List[RfidLog]:
        """Get the most recent log entries matching the filters, newest first"""
        pass
