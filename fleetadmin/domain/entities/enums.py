"""
Fleet Admin Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class CompanyStatus(str, Enum):
    """Tenant lifecycle status"""

    active = "active"
    suspended = "suspended"


class AdminRole(str, Enum):
    """Company admin role"""

    owner = "owner"
    manager = "manager"


class Theme(str, Enum):
    light = "light"
    dark = "dark"
    custom = "custom"


class VehicleAssignmentMode(str, Enum):
    auto = "auto"
    manual = "manual"


class RoutingMode(str, Enum):
    simple = "simple"
    optimized = "optimized"
    ai = "AI"


class GPSAccuracy(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class BillingPlan(str, Enum):
    free = "free"
    basic = "basic"
    pro = "pro"
    enterprise = "enterprise"


class BillingCycle(str, Enum):
    monthly = "monthly"
    yearly = "yearly"


class DriverStatus(str, Enum):
    """Driver account status"""

    active = "active"
    off_duty = "off_duty"
    suspended = "suspended"


class OnlineStatus(str, Enum):
    online = "online"
    offline = "offline"


class ShiftStatus(str, Enum):
    """Driver shift status"""

    scheduled = "scheduled"
    ongoing = "ongoing"
    completed = "completed"
    cancelled = "cancelled"
