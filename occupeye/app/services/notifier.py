from abc import ABC, abstractmethod
from typing import Optional


class INotifier(ABC):
    """Receives the outcome of a recorded access event"""

    @abstractmethod
    async def notify_rfid_access(
        self, user_id: str, action: str, room_name: str, building_name: str
    ) -> Optional[str]:
        """
        Deliver an entry/exit notice to the identity.

        Returns:
            Id of the created notification, or None when delivery failed
        """
        pass
