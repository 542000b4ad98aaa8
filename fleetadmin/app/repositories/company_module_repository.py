from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from fleetadmin.domain.entities import CompanyModule, ModuleDefinition


class ICompanyModuleRepository(ABC):
    """Company module assignment repository interface - application layer"""

    @abstractmethod
    async def get(self, company_id: int, module_id: int) -> Optional[CompanyModule]:
        """Get the assignment of a module to a company"""
        pass

    @abstractmethod
    async def create(self, assignment: CompanyModule) -> CompanyModule:
        """
        Create a new assignment.

        Raises:
            DuplicateEntityError: the (company, module) pair already exists
        """
        pass

    @abstractmethod
    async def update(self, assignment: CompanyModule) -> CompanyModule:
        """Update enabled flag or config of an assignment"""
        pass

    @abstractmethod
    async def delete(self, assignment: CompanyModule) -> None:
        """Hard delete an assignment"""
        pass

    @abstractmethod
    async def list_by_company(
        self, company_id: int
    ) -> List[Tuple[CompanyModule, ModuleDefinition]]:
        """Get all assignments of a company with their catalog entry, by assignment id"""
        pass
