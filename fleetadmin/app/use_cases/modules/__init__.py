"""
Module Use Cases

Module catalog and per-company module assignments.
"""

from .list_modules_use_case import ListModulesUseCase
from .assign_module_use_case import AssignModuleUseCase
from .list_company_modules_use_case import ListCompanyModulesUseCase
from .update_module_use_case import SetModuleEnabledUseCase, UpdateModuleConfigUseCase
from .remove_module_use_case import RemoveModuleUseCase
from .dtos import (
    AssignModuleCommand,
    CompanyModuleResponse,
    ModuleResponse,
    UpdateModuleConfigCommand,
)

__all__ = [
    # Use Cases
    "ListModulesUseCase",
    "AssignModuleUseCase",
    "ListCompanyModulesUseCase",
    "UpdateModuleConfigUseCase",
    "SetModuleEnabledUseCase",
    "RemoveModuleUseCase",
    # DTOs
    "AssignModuleCommand",
    "CompanyModuleResponse",
    "ModuleResponse",
    "UpdateModuleConfigCommand",
]
