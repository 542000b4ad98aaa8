from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyResponse, UpdateBrandingCommand


class UpdateBrandingUseCase:
    """Update logo, palette, font, theme and custom CSS of a company"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: int, command: UpdateBrandingCommand
    ) -> Result[CompanyResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if not company:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            changes = command.model_dump(exclude_unset=True, exclude_none=True)
            for field, value in changes.items():
                setattr(company, field, value)

            company = await self.uow.companies.update(company)
            await self.uow.commit()

            return Return.ok(CompanyResponse.model_validate(company))
