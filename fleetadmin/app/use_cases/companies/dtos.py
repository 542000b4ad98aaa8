"""
Company Use Case DTOs (Data Transfer Objects)

Command, Query and Response classes for tenant lifecycle use cases.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from fleetadmin.app.services.password_hasher import ensure_hashable
from fleetadmin.domain.entities import (
    BillingCycle,
    BillingPlan,
    CompanyStatus,
    GPSAccuracy,
    RoutingMode,
    Theme,
    VehicleAssignmentMode,
)
from fleetadmin.app.use_cases.admins.dtos import CompanyAdminResponse
from fleetadmin.app.use_cases.pagination import DEFAULT_LIMIT, MAX_LIMIT


class ColorPalette(BaseModel):
    primary: Optional[str] = Field(default=None, max_length=32)
    secondary: Optional[str] = Field(default=None, max_length=32)
    accent: Optional[str] = Field(default=None, max_length=32)


# ============================================================================
# Command DTOs
# ============================================================================


class CompanyFields(BaseModel):
    """Optional company attributes shared by create and update"""

    legal_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    whatsapp: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = None
    country: Optional[str] = Field(default=None, max_length=100)

    timezone: Optional[str] = Field(default=None, max_length=64)
    locale: Optional[str] = Field(default=None, max_length=16)
    date_format: Optional[str] = Field(default=None, max_length=32)
    currency: Optional[str] = Field(default=None, max_length=8)

    pod_required: Optional[bool] = None
    vehicle_assignment_mode: Optional[VehicleAssignmentMode] = None
    max_extra_delivery_qty: Optional[int] = Field(default=None, ge=0)
    routing_mode: Optional[RoutingMode] = None
    gps_accuracy: Optional[GPSAccuracy] = None
    has_multiple_stores: Optional[bool] = None
    enable_vehicle_stock: Optional[bool] = None
    enable_product_catalog: Optional[bool] = None
    broadcast_enabled: Optional[bool] = None
    max_allowed_drivers: Optional[int] = Field(default=None, ge=0)

    plan: Optional[BillingPlan] = None
    billing_cycle: Optional[BillingCycle] = None
    seats_limit: Optional[int] = Field(default=None, ge=0)
    api_rate_limit: Optional[int] = Field(default=None, ge=0)


class CreateCompanyCommand(CompanyFields):
    """Create a tenant together with its owner admin"""

    name: str = Field(..., min_length=2, max_length=255)

    owner_name: str = Field(..., min_length=2, max_length=255)
    owner_email: EmailStr
    owner_phone: Optional[str] = Field(default=None, max_length=50)
    owner_password: str = Field(..., min_length=8)

    @field_validator("owner_password")
    @classmethod
    def check_owner_password_bytes(cls, value: str) -> str:
        return ensure_hashable(value)

    def company_values(self) -> dict:
        """Company columns supplied by the caller; unset ones keep entity defaults"""
        return self.model_dump(
            exclude_none=True,
            exclude={"owner_name", "owner_email", "owner_phone", "owner_password"},
        )


class UpdateCompanyCommand(CompanyFields):
    """Partial update: only fields present in the request are written"""

    name: Optional[str] = Field(default=None, min_length=2, max_length=255)


class UpdateBrandingCommand(BaseModel):
    logo_url: Optional[str] = None
    color_palette: Optional[ColorPalette] = None
    font_family: Optional[str] = Field(default=None, max_length=100)
    theme: Optional[Theme] = None
    custom_css: Optional[str] = None


class ListCompaniesQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    status: Optional[CompanyStatus] = None
    search: Optional[str] = Field(default=None, max_length=255)


# ============================================================================
# Response DTOs
# ============================================================================


class CompanyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    legal_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None

    logo_url: Optional[str] = None
    color_palette: Optional[ColorPalette] = None
    font_family: Optional[str] = None
    theme: Theme
    custom_css: Optional[str] = None

    timezone: str
    locale: str
    date_format: str
    currency: str

    pod_required: bool
    vehicle_assignment_mode: VehicleAssignmentMode
    max_extra_delivery_qty: int
    routing_mode: RoutingMode
    gps_accuracy: GPSAccuracy
    has_multiple_stores: bool
    enable_vehicle_stock: bool
    enable_product_catalog: bool
    broadcast_enabled: bool
    max_allowed_drivers: int

    plan: BillingPlan
    billing_cycle: BillingCycle
    seats_limit: int
    api_rate_limit: int

    status: CompanyStatus
    created_at: datetime
    updated_at: datetime


class CompanyWithOwnerResponse(BaseModel):
    """Response for create company use case"""

    company: CompanyResponse
    owner: CompanyAdminResponse


class PaginatedCompaniesResponse(BaseModel):
    companies: List[CompanyResponse]
    total_count: int
    page: int
    limit: int
    total_pages: int
