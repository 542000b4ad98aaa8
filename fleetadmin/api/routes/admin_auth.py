"""
Admin Authentication Routes

Login for company admins and the profile of the authenticated admin.
"""

from fastapi import APIRouter, Depends, status

from fleetadmin.api.error import ClientError, ServerError
from fleetadmin.api.utils.auth_gate import AuthIdentity, require_admin
from fleetadmin.api.utils.response import ApiResponse
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.token_manager import TokenManager
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.app.use_cases.admins import (
    AdminLoginCommand,
    AdminLoginResponse,
    CompanyAdminResponse,
    GetAdminProfileUseCase,
    LoginAdminUseCase,
)
from fleetadmin.depends import get_admin_token_manager, get_password_hasher, get_unit_of_work

router = APIRouter(prefix="/admin/auth")


@router.post("/login", response_model=ApiResponse[AdminLoginResponse])
async def login(
    command: AdminLoginCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenManager = Depends(get_admin_token_manager),
):
    """
    Admin Login

    Raises:
        - 400 Bad Request: malformed body
        - 401 Unauthorized: INVALID_CREDENTIALS (unknown email or wrong password)
        - 403 Forbidden: ACCOUNT_INACTIVE
        - 500 Internal Server Error: Server error
    """
    use_case = LoginAdminUseCase(uow, hasher, tokens)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "ACCOUNT_INACTIVE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return ApiResponse(message="Login successful", data=result.value)


@router.get("/me", response_model=ApiResponse[CompanyAdminResponse])
async def me(
    identity: AuthIdentity = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetAdminProfileUseCase(uow)
    result = await use_case.execute(identity.id)

    if result.is_err():
        error = result.error
        if error.code == "ADMIN_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(message="Profile retrieved", data=result.value)
