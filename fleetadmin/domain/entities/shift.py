"""
DriverShift Entity

One working shift of a driver.
"""

from datetime import date, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from fleetadmin.domain.base import utcnow
from .enums import ShiftStatus


class DriverShift(SQLModel, table=True):
    """DriverShift entity - per-shift delivery counters for a driver"""

    __tablename__ = "driver_shifts"

    id: Optional[int] = Field(default=None, primary_key=True)
    driver_id: int = Field(foreign_key="drivers.id", nullable=False, index=True)
    company_id: int = Field(foreign_key="companies.id", nullable=False, index=True)

    shift_date: date
    start_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    end_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    status: ShiftStatus = Field(default=ShiftStatus.scheduled)

    total_orders: int = Field(default=0)
    completed_orders: int = Field(default=0)
    cancelled_orders: int = Field(default=0)
    total_distance: float = Field(default=0.0)
    total_earnings: float = Field(default=0.0)
    rating: float = Field(default=0.0)
    notes: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_shift_driver_date", "driver_id", "shift_date"),)
