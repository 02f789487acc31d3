"""
Context Resolver

Finds the room and dorm an access event belongs to.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import User
from .dtos import RoomInfo

logger = logging.getLogger(__name__)


@dataclass
class AccessContext:
    room: Optional[RoomInfo] = None
    dorm_id: Optional[str] = None
    dorm_name: Optional[str] = None


class AccessContextResolver:
    """
    Resolves event context in priority order:

    1. The scanned room, then its dorm
    2. The dorm named by the user's assigned building (only if 1 found no dorm)
    3. The user's managed dorm, which overrides any dorm found so far
    4. The managed dorm's name, if still unknown

    Lookup failures are logged and treated as "no context".
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def resolve(self, user: User, room_id: Optional[str]) -> AccessContext:
        context = AccessContext()

        if room_id:
            await self._resolve_from_room(context, room_id)

        if not context.dorm_id and user.assigned_building:
            await self._resolve_from_assigned_building(context, user.assigned_building)

        # Managers are located at the dorm they manage
        if user.managed_dorm_id:
            context.dorm_id = user.managed_dorm_id
            if not context.dorm_name:
                context.dorm_name = await self._dorm_name(user.managed_dorm_id)

        return context

    async def _resolve_from_room(self, context: AccessContext, room_id: str) -> None:
        try:
            room = await self.uow.rooms.get_by_id(room_id)
        except Exception:
            logger.warning("Error fetching room %s", room_id, exc_info=True)
            return

        if room is None:
            return

        context.room = RoomInfo.model_validate(room)
        context.dorm_id = room.dorm_id
        if room.dorm_id:
            context.dorm_name = await self._dorm_name(room.dorm_id)

    async def _resolve_from_assigned_building(
        self, context: AccessContext, building: str
    ) -> None:
        try:
            dorm = await self.uow.dorms.get_by_name(building)
        except Exception:
            logger.warning("Error finding dorm by building name %s", building, exc_info=True)
            return

        if dorm is not None:
            context.dorm_id = dorm.id
            context.dorm_name = building

    async def _dorm_name(self, dorm_id: str) -> Optional[str]:
        try:
            dorm = await self.uow.dorms.get_by_id(dorm_id)
        except Exception:
            logger.warning("Error fetching dorm %s", dorm_id, exc_info=True)
            return None
        return dorm.name if dorm else None
