"""
Module Routes - Catalog and Company Module Assignments
"""

from typing import List

from fastapi import APIRouter, Depends, status

from fleetadmin.api.error import ClientError, ServerError
from fleetadmin.api.utils.auth_gate import require_admin
from fleetadmin.api.utils.response import ApiResponse
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.app.use_cases.modules import (
    AssignModuleCommand,
    AssignModuleUseCase,
    CompanyModuleResponse,
    ListCompanyModulesUseCase,
    ListModulesUseCase,
    ModuleResponse,
    RemoveModuleUseCase,
    SetModuleEnabledUseCase,
    UpdateModuleConfigCommand,
    UpdateModuleConfigUseCase,
)
from fleetadmin.depends import get_unit_of_work
from fleetadmin.libs.result import Error

router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])


def _raise_assignment_error(error: Error):
    if error.code == "MODULE_NOT_ASSIGNED":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("/modules", response_model=ApiResponse[List[ModuleResponse]])
async def list_modules(uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = ListModulesUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(message="Modules retrieved", data=result.value)


@router.get(
    "/companies/{company_id}/modules",
    response_model=ApiResponse[List[CompanyModuleResponse]],
)
async def list_company_modules(company_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = ListCompanyModulesUseCase(uow)
    result = await use_case.execute(company_id)

    if result.is_err():
        error = result.error
        if error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(message="Company modules retrieved", data=result.value)


@router.post(
    "/companies/{company_id}/modules",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[CompanyModuleResponse],
)
async def assign_module(
    company_id: int,
    command: AssignModuleCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign Module to Company

    Raises:
        - 403 Forbidden: COMPANY_SUSPENDED
        - 404 Not Found: COMPANY_NOT_FOUND, MODULE_NOT_FOUND
        - 409 Conflict: MODULE_ALREADY_ASSIGNED
    """
    use_case = AssignModuleUseCase(uow)
    result = await use_case.execute(company_id, command)

    if result.is_err():
        error = result.error
        if error.code in ("COMPANY_NOT_FOUND", "MODULE_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "COMPANY_SUSPENDED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "MODULE_ALREADY_ASSIGNED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return ApiResponse(message="Module assigned successfully", data=result.value)


@router.put(
    "/companies/{company_id}/modules/{module_id}",
    response_model=ApiResponse[CompanyModuleResponse],
)
async def update_module_config(
    company_id: int,
    module_id: int,
    command: UpdateModuleConfigCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateModuleConfigUseCase(uow)
    result = await use_case.execute(company_id, module_id, command)

    if result.is_err():
        _raise_assignment_error(result.error)

    return ApiResponse(message="Module config updated", data=result.value)


@router.put(
    "/companies/{company_id}/modules/{module_id}/enable",
    response_model=ApiResponse[CompanyModuleResponse],
)
async def enable_module(
    company_id: int, module_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    use_case = SetModuleEnabledUseCase(uow)
    result = await use_case.execute(company_id, module_id, True)

    if result.is_err():
        _raise_assignment_error(result.error)

    return ApiResponse(message="Module enabled", data=result.value)


@router.put(
    "/companies/{company_id}/modules/{module_id}/disable",
    response_model=ApiResponse[CompanyModuleResponse],
)
async def disable_module(
    company_id: int, module_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    use_case = SetModuleEnabledUseCase(uow)
    result = await use_case.execute(company_id, module_id, False)

    if result.is_err():
        _raise_assignment_error(result.error)

    return ApiResponse(message="Module disabled", data=result.value)


@router.delete(
    "/companies/{company_id}/modules/{module_id}",
    response_model=ApiResponse[None],
)
async def remove_module(
    company_id: int, module_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    use_case = RemoveModuleUseCase(uow)
    result = await use_case.execute(company_id, module_id)

    if result.is_err():
        _raise_assignment_error(result.error)

    return ApiResponse(message="Module removed successfully")
