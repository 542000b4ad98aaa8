from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import case, func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.app.repositories.shift_repository import IShiftRepository
from fleetadmin.domain.entities import DriverShift, ShiftStatus


class ShiftRepository(IShiftRepository):
    """Driver shift repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_driver(
        self,
        driver_id: int,
        page: int,
        limit: int,
        company_id: Optional[int] = None,
        status: Optional[ShiftStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Tuple[List[DriverShift], int]:
        """List a driver's shifts, most recent shift_date first"""
        stmt = select(DriverShift).where(DriverShift.driver_id == driver_id)
        if company_id is not None:
            stmt = stmt.where(DriverShift.company_id == company_id)
        if status is not None:
            stmt = stmt.where(DriverShift.status == status)
        if start_date is not None:
            stmt = stmt.where(DriverShift.shift_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(DriverShift.shift_date <= end_date)

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            stmt.order_by(col(DriverShift.shift_date).desc(), col(DriverShift.id).desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def get_performance(
        self,
        driver_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Dict[str, Any]:
        """Aggregate completed and cancelled shifts of a driver"""
        stmt = select(
            func.count(col(DriverShift.id)),
            func.sum(case((col(DriverShift.status) == ShiftStatus.completed, 1), else_=0)),
            func.sum(col(DriverShift.total_orders)),
            func.sum(col(DriverShift.completed_orders)),
            func.sum(col(DriverShift.cancelled_orders)),
            func.sum(col(DriverShift.total_distance)),
            func.sum(col(DriverShift.total_earnings)),
            func.avg(col(DriverShift.rating)),
            func.max(col(DriverShift.shift_date)),
        ).where(
            DriverShift.driver_id == driver_id,
            col(DriverShift.status).in_([ShiftStatus.completed, ShiftStatus.cancelled]),
        )
        if start_date is not None:
            stmt = stmt.where(DriverShift.shift_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(DriverShift.shift_date <= end_date)

        row = (await self.session.execute(stmt)).one()
        return {
            "total_shifts": row[0] or 0,
            "completed_shifts": int(row[1] or 0),
            "total_orders": int(row[2] or 0),
            "completed_orders": int(row[3] or 0),
            "cancelled_orders": int(row[4] or 0),
            "total_distance": float(row[5] or 0.0),
            "total_earnings": float(row[6] or 0.0),
            "average_rating": float(row[7] or 0.0),
            "last_shift_date": row[8],
        }
