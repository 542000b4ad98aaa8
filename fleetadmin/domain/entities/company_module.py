"""
CompanyModule Entity

Assignment of a catalog module to a company.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from fleetadmin.domain.base import utcnow


class CompanyModule(SQLModel, table=True):
    """
    CompanyModule entity - links Company to ModuleDefinition.

    Business Rules:
    - (company_id, module_id) must be unique; the index is the source of truth
    - is_enabled is independent of the assignment existing
    - config is opaque to this service; its schema belongs to the module
    - Removal is a hard delete
    """

    __tablename__ = "company_modules"

    id: Optional[int] = Field(default=None, primary_key=True)

    company_id: int = Field(foreign_key="companies.id", nullable=False, index=True)
    module_id: int = Field(foreign_key="modules_master.id", nullable=False, index=True)

    is_enabled: bool = Field(default=True)
    config: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_company_module_pair", "company_id", "module_id", unique=True),
    )
