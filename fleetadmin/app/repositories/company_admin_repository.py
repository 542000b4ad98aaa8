from abc import ABC, abstractmethod
from typing import List, Optional

from fleetadmin.domain.entities import CompanyAdmin


class ICompanyAdminRepository(ABC):
    """Company admin repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, admin_id: int) -> Optional[CompanyAdmin]:
        """Get admin by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[CompanyAdmin]:
        """Get admin by email address (emails are unique across companies)"""
        pass

    @abstractmethod
    async def create(self, admin: CompanyAdmin) -> CompanyAdmin:
        """
        Create a new admin.

        Raises:
            DuplicateEntityError: email already taken
        """
        pass

    @abstractmethod
    async def update(self, admin: CompanyAdmin) -> CompanyAdmin:
        """Update existing admin"""
        pass

    @abstractmethod
    async def list_by_company(self, company_id: int) -> List[CompanyAdmin]:
        """Get all admins of a company, ordered by id"""
        pass
