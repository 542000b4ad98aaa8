"""
Company Routes - Tenant Lifecycle Endpoints

POST /admin/companies is the bootstrap entry point and needs no token;
every other endpoint requires an admin bearer token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from fleetadmin.api.error import ClientError, ServerError
from fleetadmin.api.utils.auth_gate import require_admin
from fleetadmin.api.utils.response import ApiResponse
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.app.use_cases.companies import (
    ActivateCompanyUseCase,
    CompanyResponse,
    CompanyWithOwnerResponse,
    CreateCompanyCommand,
    CreateCompanyUseCase,
    DeleteCompanyUseCase,
    GetCompanyUseCase,
    ListCompaniesQuery,
    ListCompaniesUseCase,
    PaginatedCompaniesResponse,
    SuspendCompanyUseCase,
    UpdateBrandingCommand,
    UpdateBrandingUseCase,
    UpdateCompanyCommand,
    UpdateCompanyUseCase,
)
from fleetadmin.depends import get_password_hasher, get_unit_of_work
from fleetadmin.libs.result import Error

router = APIRouter(prefix="/admin/companies")


def _raise_company_error(error: Error):
    if error.code == "COMPANY_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[CompanyWithOwnerResponse],
)
async def create_company(
    command: CreateCompanyCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Create Company

    Creates the company and its owner admin in one transaction.

    Raises:
        - 400 Bad Request: malformed body
        - 409 Conflict: DUPLICATE_OWNER_EMAIL
        - 500 Internal Server Error: Server error
    """
    use_case = CreateCompanyUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "DUPLICATE_OWNER_EMAIL":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return ApiResponse(message="Company created successfully", data=result.value)


@router.get(
    "",
    response_model=ApiResponse[PaginatedCompaniesResponse],
    dependencies=[Depends(require_admin)],
)
async def list_companies(
    query: Annotated[ListCompaniesQuery, Query()],
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListCompaniesUseCase(uow)
    result = await use_case.execute(query)

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(message="Companies retrieved", data=result.value)


@router.get(
    "/{company_id}",
    response_model=ApiResponse[CompanyResponse],
    dependencies=[Depends(require_admin)],
)
async def get_company(company_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = GetCompanyUseCase(uow)
    result = await use_case.execute(company_id)

    if result.is_err():
        _raise_company_error(result.error)

    return ApiResponse(message="Company retrieved", data=result.value)


@router.put(
    "/{company_id}",
    response_model=ApiResponse[CompanyResponse],
    dependencies=[Depends(require_admin)],
)
async def update_company(
    company_id: int,
    command: UpdateCompanyCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateCompanyUseCase(uow)
    result = await use_case.execute(company_id, command)

    if result.is_err():
        _raise_company_error(result.error)

    return ApiResponse(message="Company updated successfully", data=result.value)


@router.delete(
    "/{company_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def delete_company(company_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Company

    Removes the company, its admins and its module assignments.

    Raises:
        - 404 Not Found: COMPANY_NOT_FOUND
        - 409 Conflict: COMPANY_HAS_DRIVERS
    """
    use_case = DeleteCompanyUseCase(uow)
    result = await use_case.execute(company_id)

    if result.is_err():
        error = result.error
        if error.code == "COMPANY_HAS_DRIVERS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        _raise_company_error(error)

    return ApiResponse(message="Company deleted successfully")


@router.put(
    "/{company_id}/branding",
    response_model=ApiResponse[CompanyResponse],
    dependencies=[Depends(require_admin)],
)
async def update_branding(
    company_id: int,
    command: UpdateBrandingCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateBrandingUseCase(uow)
    result = await use_case.execute(company_id, command)

    if result.is_err():
        _raise_company_error(result.error)

    return ApiResponse(message="Branding updated successfully", data=result.value)


@router.put(
    "/{company_id}/suspend",
    response_model=ApiResponse[CompanyResponse],
    dependencies=[Depends(require_admin)],
)
async def suspend_company(company_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Suspend Company

    Idempotent: suspending a suspended company returns it unchanged.
    """
    use_case = SuspendCompanyUseCase(uow)
    result = await use_case.execute(company_id)

    if result.is_err():
        _raise_company_error(result.error)

    return ApiResponse(message="Company suspended", data=result.value)


@router.put(
    "/{company_id}/activate",
    response_model=ApiResponse[CompanyResponse],
    dependencies=[Depends(require_admin)],
)
async def activate_company(company_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = ActivateCompanyUseCase(uow)
    result = await use_case.execute(company_id)

    if result.is_err():
        _raise_company_error(result.error)

    return ApiResponse(message="Company activated", data=result.value)
