"""
User Routes - End User Management (user token required)
"""

from typing import List

from fastapi import APIRouter, Depends, status

from fleetadmin.api.error import ClientError, ServerError
from fleetadmin.api.utils.auth_gate import require_user
from fleetadmin.api.utils.response import ApiResponse
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.app.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserResponse,
)
from fleetadmin.depends import get_password_hasher, get_unit_of_work
from fleetadmin.libs.result import Error

router = APIRouter(prefix="/users", dependencies=[Depends(require_user)])


def _raise_user_error(error: Error):
    if error.code == "USER_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "EMAIL_ALREADY_EXISTS":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.get("", response_model=ApiResponse[List[UserResponse]])
async def list_users(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListUsersUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return ApiResponse(message="Users retrieved", data=result.value)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[UserResponse])
async def create_user(
    command: CreateUserCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    result = await CreateUserUseCase(uow, hasher).execute(command)

    if result.is_err():
        _raise_user_error(result.error)

    return ApiResponse(message="User created successfully", data=result.value)


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(user_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        _raise_user_error(result.error)

    return ApiResponse(message="User retrieved", data=result.value)


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(
    user_id: int,
    command: UpdateUserCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateUserUseCase(uow).execute(user_id, command)

    if result.is_err():
        _raise_user_error(result.error)

    return ApiResponse(message="User updated successfully", data=result.value)


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(user_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await DeleteUserUseCase(uow).execute(user_id)

    if result.is_err():
        _raise_user_error(result.error)

    return ApiResponse(message="User deleted successfully")
