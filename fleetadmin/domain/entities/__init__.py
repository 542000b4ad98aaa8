"""
Fleet Admin Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AdminRole,
    BillingCycle,
    BillingPlan,
    CompanyStatus,
    DriverStatus,
    GPSAccuracy,
    OnlineStatus,
    RoutingMode,
    ShiftStatus,
    Theme,
    VehicleAssignmentMode,
)

# Export all entities
from .company import Company
from .company_admin import CompanyAdmin
from .module import ModuleDefinition
from .company_module import CompanyModule
from .driver import Driver
from .shift import DriverShift
from .user import User

__all__ = [
    # Enums
    "AdminRole",
    "BillingCycle",
    "BillingPlan",
    "CompanyStatus",
    "DriverStatus",
    "GPSAccuracy",
    "OnlineStatus",
    "RoutingMode",
    "ShiftStatus",
    "Theme",
    "VehicleAssignmentMode",
    # Entities
    "Company",
    "CompanyAdmin",
    "ModuleDefinition",
    "CompanyModule",
    "Driver",
    "DriverShift",
    "User",
]
