"""
Driver Routes - Driver Management and Reporting
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from fleetadmin.api.error import ClientError, ServerError
from fleetadmin.api.utils.auth_gate import require_admin
from fleetadmin.api.utils.response import ApiResponse
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.app.use_cases.drivers import (
    AssignDriverToCompanyCommand,
    AssignDriverToCompanyUseCase,
    CreateDriverCommand,
    CreateDriverUseCase,
    DeleteDriverUseCase,
    DriverPerformanceResponse,
    DriverResponse,
    GetDriverPerformanceUseCase,
    GetDriverUseCase,
    ListDriversQuery,
    ListDriversUseCase,
    PaginatedDriversResponse,
    PerformanceQuery,
    SetDriverStatusUseCase,
    UpdateDriverCommand,
    UpdateDriverUseCase,
)
from fleetadmin.app.use_cases.shifts import (
    ListDriverShiftsUseCase,
    ListShiftsQuery,
    PaginatedShiftsResponse,
)
from fleetadmin.depends import get_password_hasher, get_unit_of_work
from fleetadmin.domain.entities import DriverStatus
from fleetadmin.libs.result import Error

router = APIRouter(prefix="/admin/drivers", dependencies=[Depends(require_admin)])


def _raise_driver_error(error: Error):
    if error.code in ("DRIVER_NOT_FOUND", "COMPANY_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "COMPANY_SUSPENDED":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("DUPLICATE_DRIVER_PHONE", "DRIVER_LIMIT_REACHED"):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[DriverResponse])
async def create_driver(
    command: CreateDriverCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Create Driver

    Raises:
        - 403 Forbidden: COMPANY_SUSPENDED
        - 404 Not Found: COMPANY_NOT_FOUND
        - 409 Conflict: DUPLICATE_DRIVER_PHONE, DRIVER_LIMIT_REACHED
    """
    use_case = CreateDriverUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver created successfully", data=result.value)


@router.get("", response_model=ApiResponse[PaginatedDriversResponse])
async def list_drivers(
    query: Annotated[ListDriversQuery, Query()],
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListDriversUseCase(uow)
    result = await use_case.execute(query)

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(message="Drivers retrieved", data=result.value)


@router.get("/{driver_id}", response_model=ApiResponse[DriverResponse])
async def get_driver(driver_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = GetDriverUseCase(uow)
    result = await use_case.execute(driver_id)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver retrieved", data=result.value)


@router.put("/{driver_id}", response_model=ApiResponse[DriverResponse])
async def update_driver(
    driver_id: int,
    command: UpdateDriverCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateDriverUseCase(uow)
    result = await use_case.execute(driver_id, command)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver updated successfully", data=result.value)


@router.delete("/{driver_id}", response_model=ApiResponse[None])
async def delete_driver(driver_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = DeleteDriverUseCase(uow)
    result = await use_case.execute(driver_id)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver deleted successfully")


@router.put("/{driver_id}/assign-company", response_model=ApiResponse[DriverResponse])
async def assign_company(
    driver_id: int,
    command: AssignDriverToCompanyCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = AssignDriverToCompanyUseCase(uow)
    result = await use_case.execute(driver_id, command)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver assigned to company", data=result.value)


@router.put("/{driver_id}/block", response_model=ApiResponse[DriverResponse])
async def block_driver(driver_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = SetDriverStatusUseCase(uow)
    result = await use_case.execute(driver_id, DriverStatus.suspended)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver blocked", data=result.value)


@router.put("/{driver_id}/unblock", response_model=ApiResponse[DriverResponse])
async def unblock_driver(driver_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = SetDriverStatusUseCase(uow)
    result = await use_case.execute(driver_id, DriverStatus.active)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver unblocked", data=result.value)


@router.get("/{driver_id}/performance", response_model=ApiResponse[DriverPerformanceResponse])
async def driver_performance(
    driver_id: int,
    query: Annotated[PerformanceQuery, Query()],
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetDriverPerformanceUseCase(uow)
    result = await use_case.execute(driver_id, query)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver performance retrieved", data=result.value)


@router.get("/{driver_id}/shifts", response_model=ApiResponse[PaginatedShiftsResponse])
async def driver_shifts(
    driver_id: int,
    query: Annotated[ListShiftsQuery, Query()],
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListDriverShiftsUseCase(uow)
    result = await use_case.execute(driver_id, query)

    if result.is_err():
        _raise_driver_error(result.error)

    return ApiResponse(message="Driver shifts retrieved", data=result.value)
