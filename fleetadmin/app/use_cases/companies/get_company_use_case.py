from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyResponse


class GetCompanyUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: int) -> Result[CompanyResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if not company:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            return Return.ok(CompanyResponse.model_validate(company))
