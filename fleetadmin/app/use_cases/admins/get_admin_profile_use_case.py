from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyAdminResponse


class GetAdminProfileUseCase:
    """Resolve the admin behind a validated token"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, admin_id: int) -> Result[CompanyAdminResponse]:
        async with self.uow:
            admin = await self.uow.admins.get_by_id(admin_id)
            if admin is None:
                return Return.err(Error("ADMIN_NOT_FOUND", "Admin not found"))

            return Return.ok(CompanyAdminResponse.model_validate(admin))
