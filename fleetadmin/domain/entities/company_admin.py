"""
CompanyAdmin Entity

A person who manages exactly one company.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from fleetadmin.domain.base import utcnow
from .enums import AdminRole


class CompanyAdmin(SQLModel, table=True):
    """
    CompanyAdmin entity - tenant administrator.

    Business Rules:
    - Email is unique across all admins of all companies
    - The owner role is granted once, to the creator of the company
    - Inactive admins cannot log in even with correct credentials
    - password_hash is never serialized outward
    """

    __tablename__ = "company_admins"

    id: Optional[int] = Field(default=None, primary_key=True)
    company_id: int = Field(foreign_key="companies.id", nullable=False, index=True)

    full_name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: AdminRole = Field(default=AdminRole.manager)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_company_admin_role", "company_id", "role"),)
