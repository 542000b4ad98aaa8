"""
Update Company Use Case

Partial update of company profile, localisation, business rules and billing.
"""

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyResponse, UpdateCompanyCommand


class UpdateCompanyUseCase:
    """
    Update a company.

    Only fields explicitly present in the command are written; status is not
    updatable here (see SuspendCompanyUseCase / ActivateCompanyUseCase).
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: int, command: UpdateCompanyCommand
    ) -> Result[CompanyResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if not company:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            changes = command.model_dump(exclude_unset=True, exclude_none=True)
            for field, value in changes.items():
                setattr(company, field, value)

            if changes:
                company = await self.uow.companies.update(company)
                await self.uow.commit()

            return Return.ok(CompanyResponse.model_validate(company))
