from abc import ABC, abstractmethod

from occupeye.app.repositories.dorm_repository import IDormRepository
from occupeye.app.repositories.notification_repository import INotificationRepository
from occupeye.app.repositories.rfid_log_repository import IRfidLogRepository
from occupeye.app.repositories.room_repository import IRoomRepository
from occupeye.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    dorms: IDormRepository
    rooms: IRoomRepository
    rfid_logs: IRfidLogRepository
    notifications: INotificationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
