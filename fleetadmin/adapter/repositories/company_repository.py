from typing import List, Optional, Tuple

from sqlalchemy import delete, func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.app.repositories.company_repository import ICompanyRepository
from fleetadmin.domain.base import utcnow
from fleetadmin.domain.entities import Company, CompanyAdmin, CompanyModule, CompanyStatus


class CompanyRepository(ICompanyRepository):
    """Company repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: int) -> Optional[Company]:
        """Get company by ID"""
        stmt = select(Company).where(Company.id == company_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, company: Company) -> Company:
        """Create a new company"""
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company

    async def update(self, company: Company) -> Company:
        """Update existing company"""
        company.updated_at = utcnow()
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company

    async def delete(self, company: Company) -> None:
        """Hard delete a company together with its admins and module assignments"""
        await self.session.execute(
            delete(CompanyModule).where(col(CompanyModule.company_id) == company.id)
        )
        await self.session.execute(
            delete(CompanyAdmin).where(col(CompanyAdmin.company_id) == company.id)
        )
        await self.session.delete(company)
        await self.session.flush()

    async def list(
        self,
        page: int,
        limit: int,
        status: Optional[CompanyStatus] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[Company], int]:
        """List companies newest first, returning the page and the total count"""
        stmt = select(Company)
        if status is not None:
            stmt = stmt.where(Company.status == status)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    col(Company.name).ilike(pattern),
                    col(Company.email).ilike(pattern),
                    col(Company.phone).ilike(pattern),
                )
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            stmt.order_by(col(Company.created_at).desc(), col(Company.id).desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total
