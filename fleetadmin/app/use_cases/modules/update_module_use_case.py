"""
Use Cases: Update Module Config / Enable / Disable

Both operate on an existing (company, module) assignment.
"""

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyModuleResponse, UpdateModuleConfigCommand

MODULE_NOT_ASSIGNED = Error("MODULE_NOT_ASSIGNED", "Module is not assigned to company")


class UpdateModuleConfigUseCase:
    """Replace the config blob of an assignment"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: int, module_id: int, command: UpdateModuleConfigCommand
    ) -> Result[CompanyModuleResponse]:
        async with self.uow:
            assignment = await self.uow.company_modules.get(company_id, module_id)
            if not assignment:
                return Return.err(MODULE_NOT_ASSIGNED)

            assignment.config = command.config
            assignment = await self.uow.company_modules.update(assignment)
            module = await self.uow.modules.get_by_id(module_id)
            await self.uow.commit()

            return Return.ok(CompanyModuleResponse.build(assignment, module))


class SetModuleEnabledUseCase:
    """Enable or disable an assignment without removing it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: int, module_id: int, is_enabled: bool
    ) -> Result[CompanyModuleResponse]:
        async with self.uow:
            assignment = await self.uow.company_modules.get(company_id, module_id)
            if not assignment:
                return Return.err(MODULE_NOT_ASSIGNED)

            if assignment.is_enabled != is_enabled:
                assignment.is_enabled = is_enabled
                assignment = await self.uow.company_modules.update(assignment)
            module = await self.uow.modules.get_by_id(module_id)
            await self.uow.commit()

            return Return.ok(CompanyModuleResponse.build(assignment, module))
