from abc import ABC, abstractmethod
from typing import List, Optional

from fleetadmin.domain.entities import ModuleDefinition


class IModuleRepository(ABC):
    """Module catalog repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[ModuleDefinition]:
        """Get the whole catalog ordered by category, then name"""
        pass

    @abstractmethod
    async def get_by_id(self, module_id: int) -> Optional[ModuleDefinition]:
        """Get catalog entry by ID"""
        pass

    @abstractmethod
    async def get_by_key(self, module_key: str) -> Optional[ModuleDefinition]:
        """Get catalog entry by its stable key"""
        pass

    @abstractmethod
    async def create(self, module: ModuleDefinition) -> ModuleDefinition:
        """Add a catalog entry"""
        pass
