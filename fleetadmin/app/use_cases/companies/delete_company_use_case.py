"""
Use Case: Delete Company

Hard deletes a company with its admins and module assignments.
"""

import logging

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteCompanyUseCase:
    """
    Delete a company.

    Business Logic:
    1. Validate company exists
    2. Refuse while drivers still reference the company
    3. Delete admins, module assignments and the company in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: int) -> Result[None]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if not company:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            drivers = await self.uow.drivers.count_by_company(company_id)
            if drivers > 0:
                return Return.err(
                    Error(
                        "COMPANY_HAS_DRIVERS",
                        f"Company still has {drivers} driver(s)",
                    )
                )

            await self.uow.companies.delete(company)
            await self.uow.commit()

            logger.info("Company %s deleted", company_id)
            return Return.ok(None)
