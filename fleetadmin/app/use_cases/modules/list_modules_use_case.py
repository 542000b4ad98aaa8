from typing import List

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from .dtos import ModuleResponse


class ListModulesUseCase:
    """Return the module catalog ordered by category, then name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[ModuleResponse]]:
        async with self.uow:
            modules = await self.uow.modules.list_all()
            return Return.ok([ModuleResponse.model_validate(m) for m in modules])
