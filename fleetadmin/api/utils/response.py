"""
Response envelope shared by every endpoint:

    {"success": bool, "message": str, "data": any | null, "errors": any | null}
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str = ""
    data: Optional[T] = None
    errors: Optional[Any] = None


def fail(message: str, errors: Any = None) -> dict:
    return {"success": False, "message": message, "data": None, "errors": errors}
