from typing import List

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyAdminResponse


class ListCompanyAdminsUseCase:
    """List every admin of a company, owner included"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: int) -> Result[List[CompanyAdminResponse]]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            admins = await self.uow.admins.list_by_company(company_id)
            return Return.ok([CompanyAdminResponse.model_validate(a) for a in admins])
