"""
Assign Module Use Case

Grants a catalog module to a company.
"""

import logging
from typing import Optional

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import CompanyModule, CompanyStatus
from fleetadmin.libs.result import Error, Result, Return
from .dtos import AssignModuleCommand, CompanyModuleResponse

MODULE_ALREADY_ASSIGNED = Error(
    "MODULE_ALREADY_ASSIGNED", "Module already assigned to company"
)


class AssignModuleUseCase:
    """
    Assign a module to a company.

    Business Rules:
    - Company must exist and not be suspended
    - Module must exist in the catalog
    - At most one assignment per (company, module); two concurrent requests
      for the same pair yield one success and one MODULE_ALREADY_ASSIGNED
    """

    def __init__(self, uow: UnitOfWork, logger: Optional[logging.Logger] = None):
        self.uow = uow
        self.logger = logger or logging.getLogger(__name__)

    async def execute(
        self, company_id: int, command: AssignModuleCommand
    ) -> Result[CompanyModuleResponse]:
        async with self.uow:
            # 1. Company
            company = await self.uow.companies.get_by_id(company_id)
            if not company:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))
            if company.status == CompanyStatus.suspended:
                return Return.err(Error("COMPANY_SUSPENDED", "Company is suspended"))

            # 2. Catalog entry
            module = await self.uow.modules.get_by_id(command.module_id)
            if not module:
                return Return.err(Error("MODULE_NOT_FOUND", "Module not found"))

            # 3. Fast path for the common duplicate
            if await self.uow.company_modules.get(company_id, module.id):
                return Return.err(MODULE_ALREADY_ASSIGNED)

            # 4. Insert; the unique index decides between concurrent requests
            assignment = CompanyModule(
                company_id=company_id,
                module_id=module.id,
                is_enabled=command.is_enabled,
                config=command.config,
            )
            try:
                assignment = await self.uow.company_modules.create(assignment)
            except DuplicateEntityError:
                await self.uow.rollback()
                self.logger.info(
                    "Concurrent assignment of module %s to company %s rejected",
                    module.id,
                    company_id,
                )
                return Return.err(MODULE_ALREADY_ASSIGNED)

            await self.uow.commit()

            self.logger.info("Module %s assigned to company %s", module.module_key, company_id)
            return Return.ok(CompanyModuleResponse.build(assignment, module))
