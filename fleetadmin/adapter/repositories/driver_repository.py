from typing import List, Optional, Tuple

from sqlalchemy import delete, func, or_
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.app.repositories.driver_repository import IDriverRepository
from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.domain.base import utcnow
from fleetadmin.domain.entities import Driver, DriverShift, DriverStatus, OnlineStatus


class DriverRepository(IDriverRepository):
    """Driver repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, driver_id: int) -> Optional[Driver]:
        """Get driver by ID"""
        stmt = select(Driver).where(Driver.id == driver_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_phone(self, phone: str, company_id: int) -> Optional[Driver]:
        """Get driver by phone within a company"""
        stmt = select(Driver).where(Driver.phone == phone, Driver.company_id == company_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, driver: Driver) -> Driver:
        """Create a new driver"""
        self.session.add(driver)
        await self._flush(driver)
        await self.session.refresh(driver)
        return driver

    async def update(self, driver: Driver) -> Driver:
        """Update existing driver"""
        driver.updated_at = utcnow()
        self.session.add(driver)
        await self._flush(driver)
        await self.session.refresh(driver)
        return driver

    async def delete(self, driver: Driver) -> None:
        """Hard delete a driver and its shifts"""
        await self.session.execute(
            delete(DriverShift).where(col(DriverShift.driver_id) == driver.id)
        )
        await self.session.delete(driver)
        await self.session.flush()

    async def count_by_company(self, company_id: int) -> int:
        """Number of drivers attached to a company"""
        stmt = select(func.count()).select_from(Driver).where(Driver.company_id == company_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

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
        stmt = select(Driver)
        if company_id is not None:
            stmt = stmt.where(Driver.company_id == company_id)
        if store_id is not None:
            stmt = stmt.where(Driver.store_id == store_id)
        if status is not None:
            stmt = stmt.where(Driver.status == status)
        if online_status is not None:
            stmt = stmt.where(Driver.online_status == online_status)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    col(Driver.full_name).ilike(pattern),
                    col(Driver.phone).ilike(pattern),
                    col(Driver.email).ilike(pattern),
                )
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            stmt.order_by(col(Driver.created_at).desc(), col(Driver.id).desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def _flush(self, driver: Driver) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError(
                f"Driver phone {driver.phone} already used in company {driver.company_id}"
            ) from exc
