from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.app.repositories.company_module_repository import ICompanyModuleRepository
from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.domain.base import utcnow
from fleetadmin.domain.entities import CompanyModule, ModuleDefinition


class CompanyModuleRepository(ICompanyModuleRepository):
    """Company module assignment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, company_id: int, module_id: int) -> Optional[CompanyModule]:
        """Get the assignment of a module to a company"""
        stmt = select(CompanyModule).where(
            CompanyModule.company_id == company_id,
            CompanyModule.module_id == module_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, assignment: CompanyModule) -> CompanyModule:
        """Create a new assignment"""
        self.session.add(assignment)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError(
                f"Module {assignment.module_id} already assigned to company "
                f"{assignment.company_id}"
            ) from exc
        await self.session.refresh(assignment)
        return assignment

    async def update(self, assignment: CompanyModule) -> CompanyModule:
        """Update enabled flag or config of an assignment"""
        assignment.updated_at = utcnow()
        self.session.add(assignment)
        await self.session.flush()
        await self.session.refresh(assignment)
        return assignment

    async def delete(self, assignment: CompanyModule) -> None:
        """Hard delete an assignment"""
        await self.session.delete(assignment)
        await self.session.flush()

    async def list_by_company(
        self, company_id: int
    ) -> List[Tuple[CompanyModule, ModuleDefinition]]:
        """Get all assignments of a company with their catalog entry, by assignment id"""
        stmt = (
            select(CompanyModule, ModuleDefinition)
            .join(ModuleDefinition, col(CompanyModule.module_id) == col(ModuleDefinition.id))
            .where(CompanyModule.company_id == company_id)
            .order_by(col(CompanyModule.id))
        )
        result = await self.session.exec(stmt)
        return [(assignment, module) for assignment, module in result.all()]
