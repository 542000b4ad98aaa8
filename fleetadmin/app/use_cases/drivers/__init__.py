"""
Driver Use Cases

Driver management across companies, plus performance reporting.
"""

from .create_driver_use_case import CreateDriverUseCase
from .get_driver_use_case import GetDriverUseCase
from .update_driver_use_case import UpdateDriverUseCase
from .delete_driver_use_case import DeleteDriverUseCase
from .list_drivers_use_case import ListDriversUseCase
from .assign_driver_to_company_use_case import AssignDriverToCompanyUseCase
from .set_driver_status_use_case import SetDriverStatusUseCase
from .get_driver_performance_use_case import GetDriverPerformanceUseCase
from .dtos import (
    AssignDriverToCompanyCommand,
    CreateDriverCommand,
    DriverPerformanceResponse,
    DriverResponse,
    ListDriversQuery,
    PaginatedDriversResponse,
    PerformanceQuery,
    UpdateDriverCommand,
)

__all__ = [
    # Use Cases
    "CreateDriverUseCase",
    "GetDriverUseCase",
    "UpdateDriverUseCase",
    "DeleteDriverUseCase",
    "ListDriversUseCase",
    "AssignDriverToCompanyUseCase",
    "SetDriverStatusUseCase",
    "GetDriverPerformanceUseCase",
    # DTOs
    "AssignDriverToCompanyCommand",
    "CreateDriverCommand",
    "DriverPerformanceResponse",
    "DriverResponse",
    "ListDriversQuery",
    "PaginatedDriversResponse",
    "PerformanceQuery",
    "UpdateDriverCommand",
]
