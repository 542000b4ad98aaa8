"""
Company Admin Routes

Managers of a company; the owner is created with the company itself.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from fleetadmin.api.error import ClientError, ServerError
from fleetadmin.api.utils.auth_gate import require_admin
from fleetadmin.api.utils.response import ApiResponse
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.app.use_cases.admins import (
    CompanyAdminResponse,
    CreateCompanyAdminCommand,
    CreateCompanyAdminUseCase,
    ListCompanyAdminsUseCase,
    SetAdminActiveUseCase,
)
from fleetadmin.depends import get_password_hasher, get_unit_of_work

router = APIRouter(
    prefix="/admin/companies/{company_id}/admins",
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=ApiResponse[List[CompanyAdminResponse]])
async def list_admins(company_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = ListCompanyAdminsUseCase(uow)
    result = await use_case.execute(company_id)

    if result.is_err():
        error = result.error
        if error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(message="Admins retrieved", data=result.value)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[CompanyAdminResponse],
)
async def create_admin(
    company_id: int,
    command: CreateCompanyAdminCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Create Company Admin (manager)

    Raises:
        - 404 Not Found: COMPANY_NOT_FOUND
        - 409 Conflict: DUPLICATE_ADMIN_EMAIL
    """
    use_case = CreateCompanyAdminUseCase(uow, hasher)
    result = await use_case.execute(company_id, command)

    if result.is_err():
        error = result.error
        if error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "DUPLICATE_ADMIN_EMAIL":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return ApiResponse(message="Admin created successfully", data=result.value)


async def _set_active(company_id: int, admin_id: int, is_active: bool, uow: UnitOfWork):
    use_case = SetAdminActiveUseCase(uow)
    result = await use_case.execute(company_id, admin_id, is_active)

    if result.is_err():
        error = result.error
        if error.code == "ADMIN_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.put("/{admin_id}/activate", response_model=ApiResponse[CompanyAdminResponse])
async def activate_admin(
    company_id: int, admin_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    admin = await _set_active(company_id, admin_id, True, uow)
    return ApiResponse(message="Admin activated", data=admin)


@router.put("/{admin_id}/deactivate", response_model=ApiResponse[CompanyAdminResponse])
async def deactivate_admin(
    company_id: int, admin_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    admin = await _set_active(company_id, admin_id, False, uow)
    return ApiResponse(message="Admin deactivated", data=admin)
