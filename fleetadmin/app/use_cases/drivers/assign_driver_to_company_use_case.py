"""
Assign Driver To Company Use Case

Moves a driver to another company (and optionally store).
"""

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import CompanyStatus
from fleetadmin.libs.result import Result, Return
from .dtos import AssignDriverToCompanyCommand, DriverResponse
from .errors import (
    COMPANY_NOT_FOUND,
    COMPANY_SUSPENDED,
    DRIVER_NOT_FOUND,
    DUPLICATE_DRIVER_PHONE,
    driver_limit_reached,
)


class AssignDriverToCompanyUseCase:
    """
    Reassign a driver.

    Business Rules:
    - Target company must exist and be active
    - Moving into a new company counts against its max_allowed_drivers
    - The driver's phone must be free in the target company
    - Existing shifts keep the company they were worked for
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, driver_id: int, command: AssignDriverToCompanyCommand
    ) -> Result[DriverResponse]:
        async with self.uow:
            driver = await self.uow.drivers.get_by_id(driver_id)
            if not driver:
                return Return.err(DRIVER_NOT_FOUND)

            company = await self.uow.companies.get_by_id(command.company_id)
            if not company:
                return Return.err(COMPANY_NOT_FOUND)
            if company.status == CompanyStatus.suspended:
                return Return.err(COMPANY_SUSPENDED)

            if driver.company_id != company.id:
                current = await self.uow.drivers.count_by_company(company.id)
                if current >= company.max_allowed_drivers:
                    return Return.err(driver_limit_reached(company.max_allowed_drivers))

                if await self.uow.drivers.get_by_phone(driver.phone, company.id):
                    return Return.err(DUPLICATE_DRIVER_PHONE)

            driver.company_id = company.id
            driver.store_id = command.store_id

            try:
                driver = await self.uow.drivers.update(driver)
            except DuplicateEntityError:
                await self.uow.rollback()
                return Return.err(DUPLICATE_DRIVER_PHONE)

            await self.uow.commit()

            return Return.ok(DriverResponse.model_validate(driver))
