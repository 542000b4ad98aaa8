from abc import ABC, abstractmethod

from fleetadmin.app.repositories.company_admin_repository import ICompanyAdminRepository
from fleetadmin.app.repositories.company_module_repository import ICompanyModuleRepository
from fleetadmin.app.repositories.company_repository import ICompanyRepository
from fleetadmin.app.repositories.driver_repository import IDriverRepository
from fleetadmin.app.repositories.module_repository import IModuleRepository
from fleetadmin.app.repositories.shift_repository import IShiftRepository
from fleetadmin.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    companies: ICompanyRepository
    admins: ICompanyAdminRepository
    modules: IModuleRepository
    company_modules: ICompanyModuleRepository
    drivers: IDriverRepository
    shifts: IShiftRepository
    users: IUserRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
