"""
Company Use Cases

Tenant lifecycle: creation with owner, profile, branding, status and deletion.
"""

from .create_company_use_case import CreateCompanyUseCase
from .get_company_use_case import GetCompanyUseCase
from .update_company_use_case import UpdateCompanyUseCase
from .update_branding_use_case import UpdateBrandingUseCase
from .delete_company_use_case import DeleteCompanyUseCase
from .list_companies_use_case import ListCompaniesUseCase
from .set_company_status_use_case import ActivateCompanyUseCase, SuspendCompanyUseCase
from .dtos import (
    ColorPalette,
    CompanyResponse,
    CompanyWithOwnerResponse,
    CreateCompanyCommand,
    ListCompaniesQuery,
    PaginatedCompaniesResponse,
    UpdateBrandingCommand,
    UpdateCompanyCommand,
)

__all__ = [
    # Use Cases
    "CreateCompanyUseCase",
    "GetCompanyUseCase",
    "UpdateCompanyUseCase",
    "UpdateBrandingUseCase",
    "DeleteCompanyUseCase",
    "ListCompaniesUseCase",
    "SuspendCompanyUseCase",
    "ActivateCompanyUseCase",
    # DTOs
    "ColorPalette",
    "CompanyResponse",
    "CompanyWithOwnerResponse",
    "CreateCompanyCommand",
    "ListCompaniesQuery",
    "PaginatedCompaniesResponse",
    "UpdateBrandingCommand",
    "UpdateCompanyCommand",
]
