"""
Driver Use Case DTOs (Data Transfer Objects)
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from fleetadmin.app.services.password_hasher import ensure_hashable
from fleetadmin.domain.entities import DriverStatus, OnlineStatus
from fleetadmin.app.use_cases.pagination import DEFAULT_LIMIT, MAX_LIMIT


# ============================================================================
# Command DTOs
# ============================================================================


class CreateDriverCommand(BaseModel):
    company_id: int = Field(..., ge=1)
    store_id: Optional[int] = None
    full_name: str = Field(..., min_length=2, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    password: str = Field(..., min_length=8)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return ensure_hashable(value)
    profile_photo: Optional[str] = None


class UpdateDriverCommand(BaseModel):
    """Partial update; company and status have their own operations"""

    full_name: Optional[str] = Field(default=None, min_length=2, max_length=255)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    store_id: Optional[int] = None
    profile_photo: Optional[str] = None


class AssignDriverToCompanyCommand(BaseModel):
    company_id: int = Field(..., ge=1)
    store_id: Optional[int] = None


class ListDriversQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    company_id: Optional[int] = None
    store_id: Optional[int] = None
    status: Optional[DriverStatus] = None
    online_status: Optional[OnlineStatus] = None
    search: Optional[str] = Field(default=None, max_length=255)


class PerformanceQuery(BaseModel):
    """Optional shift_date window bounding the aggregation"""

    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def check_window(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


# ============================================================================
# Response DTOs
# ============================================================================


class DriverResponse(BaseModel):
    """Driver as exposed by the API (never carries the password hash)"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    store_id: Optional[int] = None
    full_name: str
    phone: str
    email: Optional[str] = None
    status: DriverStatus
    online_status: OnlineStatus
    rating: float
    profile_photo: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PaginatedDriversResponse(BaseModel):
    drivers: List[DriverResponse]
    total_count: int
    page: int
    limit: int
    total_pages: int


class DriverPerformanceResponse(BaseModel):
    driver_id: int
    total_shifts: int
    completed_shifts: int
    total_orders: int
    completed_orders: int
    cancelled_orders: int
    total_distance: float
    total_earnings: float
    average_rating: float
    completion_rate: float
    last_shift_date: Optional[date] = None
