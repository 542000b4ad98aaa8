"""
Shift Use Case DTOs (Data Transfer Objects)
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from fleetadmin.domain.entities import DriverShift, ShiftStatus
from fleetadmin.app.use_cases.pagination import DEFAULT_LIMIT, MAX_LIMIT


class ListShiftsQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    company_id: Optional[int] = None
    status: Optional[ShiftStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


def format_duration(start: Optional[datetime], end: Optional[datetime]) -> Optional[str]:
    """'Xh Ym' between two instants, None unless both are known"""
    if start is None or end is None:
        return None
    minutes = int((end - start).total_seconds() // 60)
    return f"{minutes // 60}h {minutes % 60}m"


class ShiftResponse(BaseModel):
    id: int
    driver_id: int
    company_id: int
    shift_date: date
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: ShiftStatus
    total_orders: int
    completed_orders: int
    cancelled_orders: int
    total_distance: float
    total_earnings: float
    rating: float
    notes: Optional[str] = None
    duration: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, shift: DriverShift) -> "ShiftResponse":
        return cls(
            **shift.model_dump(),
            duration=format_duration(shift.start_time, shift.end_time),
        )


class PaginatedShiftsResponse(BaseModel):
    shifts: List[ShiftResponse]
    total_count: int
    page: int
    limit: int
    total_pages: int
