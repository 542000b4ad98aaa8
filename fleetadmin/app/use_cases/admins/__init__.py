"""
Company Admin Use Cases

Admin authentication and management within a company.
"""

from .login_admin_use_case import LoginAdminUseCase
from .get_admin_profile_use_case import GetAdminProfileUseCase
from .create_company_admin_use_case import CreateCompanyAdminUseCase
from .list_company_admins_use_case import ListCompanyAdminsUseCase
from .set_admin_active_use_case import SetAdminActiveUseCase
from .dtos import (
    AdminLoginCommand,
    AdminLoginResponse,
    CompanyAdminResponse,
    CreateCompanyAdminCommand,
)

__all__ = [
    # Use Cases
    "LoginAdminUseCase",
    "GetAdminProfileUseCase",
    "CreateCompanyAdminUseCase",
    "ListCompanyAdminsUseCase",
    "SetAdminActiveUseCase",
    # DTOs
    "AdminLoginCommand",
    "AdminLoginResponse",
    "CompanyAdminResponse",
    "CreateCompanyAdminCommand",
]
