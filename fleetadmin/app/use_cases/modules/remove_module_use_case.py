from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from .update_module_use_case import MODULE_NOT_ASSIGNED


class RemoveModuleUseCase:
    """Hard delete the assignment of a module to a company"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: int, module_id: int) -> Result[None]:
        async with self.uow:
            assignment = await self.uow.company_modules.get(company_id, module_id)
            if not assignment:
                return Return.err(MODULE_NOT_ASSIGNED)

            await self.uow.company_modules.delete(assignment)
            await self.uow.commit()

            return Return.ok(None)
