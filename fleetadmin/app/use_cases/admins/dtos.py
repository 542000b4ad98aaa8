"""
Company Admin Use Case DTOs (Data Transfer Objects)

Command and Response classes for admin authentication and management.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from fleetadmin.app.services.password_hasher import ensure_hashable
from fleetadmin.domain.entities import AdminRole


# ============================================================================
# Command DTOs
# ============================================================================


class AdminLoginCommand(BaseModel):
    """Credentials of a company admin"""

    email: EmailStr
    password: str = Field(..., min_length=1)


class CreateCompanyAdminCommand(BaseModel):
    """Add a manager to an existing company"""

    full_name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=50)
    password: str = Field(..., min_length=8)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return ensure_hashable(value)


# ============================================================================
# Response DTOs
# ============================================================================


class CompanyAdminResponse(BaseModel):
    """Company admin as exposed by the API (never carries the password hash)"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    full_name: str
    email: str
    phone: Optional[str] = None
    role: AdminRole
    is_active: bool
    created_at: datetime
    updated_at: datetime


class AdminLoginResponse(BaseModel):
    """Response for admin login use case"""

    admin: CompanyAdminResponse
    token: str
    token_type: str = "bearer"
