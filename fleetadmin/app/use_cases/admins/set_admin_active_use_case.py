"""
Use Case: Activate / Deactivate Company Admin

Deactivated admins keep their data but can no longer log in.
"""

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyAdminResponse


class SetAdminActiveUseCase:
    """
    Toggle the activation flag of an admin.

    Idempotent: setting the current value again succeeds without a write.
    Tokens already issued stay valid until they expire.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, company_id: int, admin_id: int, is_active: bool
    ) -> Result[CompanyAdminResponse]:
        async with self.uow:
            admin = await self.uow.admins.get_by_id(admin_id)
            if admin is None or admin.company_id != company_id:
                return Return.err(Error("ADMIN_NOT_FOUND", "Admin not found"))

            if admin.is_active != is_active:
                admin.is_active = is_active
                admin = await self.uow.admins.update(admin)
                await self.uow.commit()

            return Return.ok(CompanyAdminResponse.model_validate(admin))
