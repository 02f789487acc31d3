from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from occupeye.app.repositories.rfid_log_repository import IRfidLogRepository
from occupeye.domain.entities import AccessAction, RfidLog


class RfidLogRepository(IRfidLogRepository):
    """RfidLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, log: RfidLog) -> RfidLog:
        """Append a new access log entry (immutable)"""
        self.session.add(log)
        await self.session.flush()
        await self.session.refresh(log)
        return log

    async def get_by_student_id(self, student_id: str) -> List[RfidLog]:
        """Get every log entry recorded for an identity reference"""
        stmt = select(RfidLog).where(RfidLog.student_id == student_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_recent(
        self,
        student_id: Optional[str] = None,
        room: Optional[str] = None,
        action: Optional[AccessAction] = None,
        limit: int = 100,
    ) -> List[RfidLog]:
        """Get the most recent log entries matching the filters, newest first"""
        stmt = select(RfidLog)

        if student_id:
            stmt = stmt.where(RfidLog.student_id == student_id)
        if room:
            stmt = stmt.where(RfidLog.room == room)
        if action:
            stmt = stmt.where(RfidLog.action == action)

        stmt = stmt.order_by(col(RfidLog.timestamp).desc()).limit(limit)

        result = await self.session.exec(stmt)
        return list(result.all())
