from typing import List, Optional

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.app.repositories.module_repository import IModuleRepository
from fleetadmin.domain.entities import ModuleDefinition


class ModuleRepository(IModuleRepository):
    """Module catalog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[ModuleDefinition]:
        """Get the whole catalog ordered by category, then name"""
        stmt = select(ModuleDefinition).order_by(
            col(ModuleDefinition.category), col(ModuleDefinition.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_id(self, module_id: int) -> Optional[ModuleDefinition]:
        """Get catalog entry by ID"""
        stmt = select(ModuleDefinition).where(ModuleDefinition.id == module_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_key(self, module_key: str) -> Optional[ModuleDefinition]:
        """Get catalog entry by its stable key"""
        stmt = select(ModuleDefinition).where(ModuleDefinition.module_key == module_key)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, module: ModuleDefinition) -> ModuleDefinition:
        """Add a catalog entry"""
        self.session.add(module)
        await self.session.flush()
        await self.session.refresh(module)
        return module
