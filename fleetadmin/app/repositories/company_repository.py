from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from fleetadmin.domain.entities import Company, CompanyStatus


class ICompanyRepository(ABC):
    """Company repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, company_id: int) -> Optional[Company]:
        """Get company by ID"""
        pass

    @abstractmethod
    async def create(self, company: Company) -> Company:
        """Create a new company"""
        pass

    @abstractmethod
    async def update(self, company: Company) -> Company:
        """Update existing company"""
        pass

    @abstractmethod
    async def delete(self, company: Company) -> None:
        """Hard delete a company together with its admins and module assignments"""
        pass

    @abstractmethod
    async def list(
        self,
        page: int,
        limit: int,
        status: Optional[CompanyStatus] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[Company], int]:
        """List companies newest first, returning the page and the total count"""
        pass
