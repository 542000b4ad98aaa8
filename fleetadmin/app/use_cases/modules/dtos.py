"""
Module Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AssignModuleCommand(BaseModel):
    module_id: int = Field(..., ge=1)
    is_enabled: bool = True
    config: Optional[Dict[str, Any]] = None


class UpdateModuleConfigCommand(BaseModel):
    """Replaces the stored config wholesale; the content is opaque here"""

    config: Dict[str, Any]


class ModuleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    module_key: str
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    default_enabled: bool


class CompanyModuleResponse(BaseModel):
    """Assignment enriched with its catalog entry"""

    id: int
    company_id: int
    module: ModuleResponse
    is_enabled: bool
    config: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, assignment, module) -> "CompanyModuleResponse":
        return cls(
            id=assignment.id,
            company_id=assignment.company_id,
            module=ModuleResponse.model_validate(module),
            is_enabled=assignment.is_enabled,
            config=assignment.config,
            created_at=assignment.created_at,
            updated_at=assignment.updated_at,
        )
