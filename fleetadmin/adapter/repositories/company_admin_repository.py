from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.app.repositories.company_admin_repository import ICompanyAdminRepository
from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.domain.base import utcnow
from fleetadmin.domain.entities import CompanyAdmin


class CompanyAdminRepository(ICompanyAdminRepository):
    """Company admin repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, admin_id: int) -> Optional[CompanyAdmin]:
        """Get admin by ID"""
        stmt = select(CompanyAdmin).where(CompanyAdmin.id == admin_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[CompanyAdmin]:
        """Get admin by email address"""
        stmt = select(CompanyAdmin).where(CompanyAdmin.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, admin: CompanyAdmin) -> CompanyAdmin:
        """Create a new admin"""
        self.session.add(admin)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError(f"Admin email already exists: {admin.email}") from exc
        await self.session.refresh(admin)
        return admin

    async def update(self, admin: CompanyAdmin) -> CompanyAdmin:
        """Update existing admin"""
        admin.updated_at = utcnow()
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def list_by_company(self, company_id: int) -> List[CompanyAdmin]:
        """Get all admins of a company, ordered by id"""
        stmt = (
            select(CompanyAdmin)
            .where(CompanyAdmin.company_id == company_id)
            .order_by(col(CompanyAdmin.id))
        )
        result = await self.session.exec(stmt)
        return list(result.all())
