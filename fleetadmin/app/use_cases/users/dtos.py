"""
User Use Case DTOs (Data Transfer Objects)

Command and Response classes for end user authentication and management.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from fleetadmin.app.services.password_hasher import ensure_hashable


class RegisterUserCommand(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return ensure_hashable(value)


# Creating a user from the API takes the same fields as self-registration
CreateUserCommand = RegisterUserCommand


class LoginUserCommand(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UpdateUserCommand(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class UserAuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: UserResponse
    token: str
    token_type: str = "bearer"
