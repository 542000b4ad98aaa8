from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from fleetadmin.domain.entities import Driver, DriverStatus, OnlineStatus


class IDriverRepository(ABC):
    """Driver repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, driver_id: int) -> Optional[Driver]:
        """Get driver by ID"""
        pass

    @abstractmethod
    async def get_by_phone(self, phone: str, company_id: int) -> Optional[Driver]:
        """Get driver by phone within a company"""
        pass

    @abstractmethod
    async def create(self, driver: Driver) -> Driver:
        """
        Create a new driver.

        Raises:
            DuplicateEntityError: phone already used in the company
        """
        pass

    @abstractmethod
    async def update(self, driver: Driver) -> Driver:
        """
        Update existing driver.

        Raises:
            DuplicateEntityError: phone already used in the company
        """
        pass

    @abstractmethod
    async def delete(self, driver: Driver) -> None:
        """Hard delete a driver and its shifts"""
        pass

    @abstractmethod
    async def count_by_company(self, company_id: int) -> int:
        """Number of drivers attached to a company"""
        pass

    @abstractmethod
    async def list(
        self,
        page: int,
        limit: int,
        company_id: Optional[int] = None,
        store_id: Optional[int] = None,
        status: Optional[DriverStatus] = None,
        online_status: Optional[OnlineStatus] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[Driver], int]:
        """List drivers newest first, returning the page and the total count"""
        pass
