"""
Use Case: Suspend / Activate Company

Reversible tenant status transitions.
"""

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import CompanyStatus
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyResponse


class _SetCompanyStatusUseCase:
    target_status: CompanyStatus

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: int) -> Result[CompanyResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if not company:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            # Repeating the current status is a no-op, not an error
            if company.status != self.target_status:
                company.status = self.target_status
                company = await self.uow.companies.update(company)
                await self.uow.commit()

            return Return.ok(CompanyResponse.model_validate(company))


class SuspendCompanyUseCase(_SetCompanyStatusUseCase):
    """
    Suspend a company.

    Idempotent. Admins and drivers are untouched; the company can no longer
    receive new drivers or module assignments until reactivated.
    """

    target_status = CompanyStatus.suspended


class ActivateCompanyUseCase(_SetCompanyStatusUseCase):
    """Reactivate a suspended company. Idempotent."""

    target_status = CompanyStatus.active
