"""
User Use Cases

End user registration, login and management.
"""

from .create_user_use_case import CreateUserUseCase, RegisterUserUseCase
from .login_user_use_case import LoginUserUseCase
from .get_user_use_case import GetUserUseCase, ListUsersUseCase
from .update_user_use_case import DeleteUserUseCase, UpdateUserUseCase
from .dtos import (
    CreateUserCommand,
    LoginUserCommand,
    RegisterUserCommand,
    UpdateUserCommand,
    UserAuthResponse,
    UserResponse,
)

__all__ = [
    # Use Cases
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    # DTOs
    "CreateUserCommand",
    "LoginUserCommand",
    "RegisterUserCommand",
    "UpdateUserCommand",
    "UserAuthResponse",
    "UserResponse",
]
