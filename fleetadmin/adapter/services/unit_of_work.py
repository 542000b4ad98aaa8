from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.adapter.repositories.company_admin_repository import CompanyAdminRepository
from fleetadmin.adapter.repositories.company_module_repository import CompanyModuleRepository
from fleetadmin.adapter.repositories.company_repository import CompanyRepository
from fleetadmin.adapter.repositories.driver_repository import DriverRepository
from fleetadmin.adapter.repositories.module_repository import ModuleRepository
from fleetadmin.adapter.repositories.shift_repository import ShiftRepository
from fleetadmin.adapter.repositories.user_repository import UserRepository
from fleetadmin.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.companies = CompanyRepository(self.session)
        self.admins = CompanyAdminRepository(self.session)
        self.modules = ModuleRepository(self.session)
        self.company_modules = CompanyModuleRepository(self.session)
        self.drivers = DriverRepository(self.session)
        self.shifts = ShiftRepository(self.session)
        self.users = UserRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
