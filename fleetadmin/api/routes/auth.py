"""
End User Authentication Routes
"""

from fastapi import APIRouter, Depends, status

from fleetadmin.api.error import ClientError, ServerError
from fleetadmin.api.utils.auth_gate import AuthIdentity, require_user
from fleetadmin.api.utils.response import ApiResponse
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.token_manager import TokenManager
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.app.use_cases.users import (
    GetUserUseCase,
    LoginUserCommand,
    LoginUserUseCase,
    RegisterUserCommand,
    RegisterUserUseCase,
    UserAuthResponse,
    UserResponse,
)
from fleetadmin.depends import get_password_hasher, get_unit_of_work, get_user_token_manager

router = APIRouter(prefix="/auth")


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[UserAuthResponse],
)
async def register(
    command: RegisterUserCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenManager = Depends(get_user_token_manager),
):
    """
    Register

    Raises:
        - 400 Bad Request: malformed body
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    use_case = RegisterUserUseCase(uow, hasher, tokens)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return ApiResponse(message="User registered successfully", data=result.value)


@router.post("/login", response_model=ApiResponse[UserAuthResponse])
async def login(
    command: LoginUserCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenManager = Depends(get_user_token_manager),
):
    use_case = LoginUserUseCase(uow, hasher, tokens)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return ApiResponse(message="Login successful", data=result.value)


@router.get("/me", response_model=ApiResponse[UserResponse])
async def me(
    identity: AuthIdentity = Depends(require_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetUserUseCase(uow)
    result = await use_case.execute(identity.id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return ApiResponse(message="Profile retrieved", data=result.value)
