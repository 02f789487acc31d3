from sqlmodel.ext.asyncio.session import AsyncSession

from occupeye.adapter.repositories.dorm_repository import DormRepository
from occupeye.adapter.repositories.notification_repository import NotificationRepository
from occupeye.adapter.repositories.rfid_log_repository import RfidLogRepository
from occupeye.adapter.repositories.room_repository import RoomRepository
from occupeye.adapter.repositories.user_repository import UserRepository
from occupeye.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.dorms = DormRepository(self.session)
        self.rooms = RoomRepository(self.session)
        self.rfid_logs = RfidLogRepository(self.session)
        self.notifications = NotificationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
