"""
Company Entity

A tenant of the platform. Drivers, shifts, admins and module assignments
all hang off a company.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from fleetadmin.domain.base import utcnow
from .enums import (
    BillingCycle,
    BillingPlan,
    CompanyStatus,
    GPSAccuracy,
    RoutingMode,
    Theme,
    VehicleAssignmentMode,
)


class Company(SQLModel, table=True):
    """
    Company entity - isolated tenant workspace.

    Business Rules:
    - Always has exactly one owner admin once created
    - Suspension is reversible and does not cascade to admins or drivers
    - Suspended companies cannot receive new drivers or module assignments
    """

    __tablename__ = "companies"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    legal_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    whatsapp: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = None
    country: Optional[str] = Field(default=None, max_length=100)

    # Branding
    logo_url: Optional[str] = None
    color_palette: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    font_family: Optional[str] = Field(default=None, max_length=100)
    theme: Theme = Field(default=Theme.light)
    custom_css: Optional[str] = None

    # Localization
    timezone: str = Field(default="UTC", max_length=64)
    locale: str = Field(default="en", max_length=16)
    date_format: str = Field(default="dd/mm/yyyy", max_length=32)
    currency: str = Field(default="USD", max_length=8)

    # Business rules
    pod_required: bool = Field(default=False)
    vehicle_assignment_mode: VehicleAssignmentMode = Field(
        default=VehicleAssignmentMode.manual
    )
    max_extra_delivery_qty: int = Field(default=0)
    routing_mode: RoutingMode = Field(default=RoutingMode.simple)
    gps_accuracy: GPSAccuracy = Field(default=GPSAccuracy.medium)
    has_multiple_stores: bool = Field(default=False)
    enable_vehicle_stock: bool = Field(default=False)
    enable_product_catalog: bool = Field(default=False)
    broadcast_enabled: bool = Field(default=True)
    max_allowed_drivers: int = Field(default=10)

    # Billing
    plan: BillingPlan = Field(default=BillingPlan.free)
    billing_cycle: BillingCycle = Field(default=BillingCycle.monthly)
    seats_limit: int = Field(default=10)
    api_rate_limit: int = Field(default=1000)

    status: CompanyStatus = Field(default=CompanyStatus.active)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_company_status", "status"),
        Index("idx_company_created_at", "created_at"),
    )
