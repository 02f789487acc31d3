"""
Dorm Use Cases

Creation and listing of dorms.
"""

from occupeye.libs.result import Error, Result, Return
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.domain.entities import Dorm
from .dtos import CreateDormCommand, DormInfo, DormListResponse


class CreateDormUseCase:
    """
    Use case for creating a dorm.

    Business Rules:
    - Dorm names are unique; access events resolve a user's assigned
      building to a dorm by name
    - An explicit id may be supplied, and must be unused
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateDormCommand) -> Result[DormInfo]:
        async with self.uow:
            if await self.uow.dorms.get_by_name(command.name):
                return Return.err(Error("DORM_ALREADY_EXISTS", "A dorm with this name exists"))

            if command.id and await self.uow.dorms.get_by_id(command.id):
                return Return.err(Error("DORM_ALREADY_EXISTS", "A dorm with this id exists"))

            fields = command.model_dump(exclude_none=True)
            dorm = await self.uow.dorms.create(Dorm(**fields))
            await self.uow.commit()

            return Return.ok(DormInfo.model_validate(dorm))


class ListDormsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DormListResponse]:
        async with self.uow:
            dorms = await self.uow.dorms.list_all()
            return Return.ok(DormListResponse(dorms=[DormInfo.model_validate(d) for d in dorms]))
