"""
Driver Entity

A driver working for a company.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from fleetadmin.domain.base import utcnow
from .enums import DriverStatus, OnlineStatus


class Driver(SQLModel, table=True):
    """
    Driver entity.

    Business Rules:
    - (company_id, phone) must be unique
    - Blocking sets status=suspended, unblocking sets status=active
    """

    __tablename__ = "drivers"

    id: Optional[int] = Field(default=None, primary_key=True)
    company_id: int = Field(foreign_key="companies.id", nullable=False, index=True)
    store_id: Optional[int] = Field(default=None, index=True)

    full_name: str = Field(max_length=255)
    phone: str = Field(max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    password_hash: str = Field(max_length=60)

    status: DriverStatus = Field(default=DriverStatus.active)
    online_status: OnlineStatus = Field(default=OnlineStatus.offline)
    rating: float = Field(default=0.0)
    profile_photo: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_driver_company_phone", "company_id", "phone", unique=True),
        Index("idx_driver_status", "status"),
    )
