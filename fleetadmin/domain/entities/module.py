"""
ModuleDefinition Entity

Catalog entry for an optional platform capability.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from fleetadmin.domain.base import utcnow


class ModuleDefinition(SQLModel, table=True):
    """
    ModuleDefinition entity - immutable capability catalog.

    Business Rules:
    - module_key is unique and stable
    - Not tenant specific; tenants reference it through CompanyModule
    """

    __tablename__ = "modules_master"

    id: Optional[int] = Field(default=None, primary_key=True)
    module_key: str = Field(unique=True, index=True, max_length=100)
    name: str = Field(max_length=255)
    category: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = None
    default_enabled: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
