from typing import List

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyModuleResponse


class ListCompanyModulesUseCase:
    """List a company's module assignments joined with the catalog, by assignment id"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: int) -> Result[List[CompanyModuleResponse]]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if not company:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            rows = await self.uow.company_modules.list_by_company(company_id)
            return Return.ok(
                [CompanyModuleResponse.build(assignment, module) for assignment, module in rows]
            )
