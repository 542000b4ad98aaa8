"""
Bearer token authentication for protected routes.

One gate per token namespace; the gate only verifies the token, it never
touches the database.
"""

import logging
from typing import Optional

from fastapi import Request, status
from pydantic import BaseModel

from fleetadmin.api.error import ClientError
from fleetadmin.app.services.token_manager import (
    ExpiredTokenError,
    InvalidTokenError,
    TokenManager,
    TokenNamespace,
)
from fleetadmin.libs.result import Error

BEARER_PREFIX = "Bearer "


class AuthIdentity(BaseModel):
    """Authenticated caller attached to request.state.identity"""

    id: int
    email: Optional[str] = None
    role: Optional[str] = None
    company_id: Optional[int] = None
    namespace: TokenNamespace


def _unauthorized(code: str, message: str) -> ClientError:
    return ClientError(
        Error(code, message),
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


class BearerAuthGate:
    """
    FastAPI dependency guarding a route with a namespace's bearer token.

    Failure order:
    1. Missing Authorization header  -> UNAUTHORIZED
    2. Not a "Bearer " header        -> INVALID_AUTH_SCHEME
    3. Empty token after the prefix  -> TOKEN_REQUIRED
    4. Expired token                 -> TOKEN_EXPIRED
    5. Anything else wrong           -> INVALID_TOKEN (reason never disclosed)
    """

    def __init__(self, namespace: TokenNamespace, logger: Optional[logging.Logger] = None):
        self.namespace = namespace
        self.logger = logger or logging.getLogger(__name__)

    def token_manager(self, request: Request) -> TokenManager:
        return request.app.state.token_managers[self.namespace]

    async def __call__(self, request: Request) -> AuthIdentity:
        header = request.headers.get("Authorization")
        if not header:
            raise _unauthorized("UNAUTHORIZED", "Authorization header required")

        if not header.startswith(BEARER_PREFIX):
            raise _unauthorized("INVALID_AUTH_SCHEME", "Invalid authorization format")

        token = header[len(BEARER_PREFIX):].strip()
        if not token:
            raise _unauthorized("TOKEN_REQUIRED", "Token is required")

        try:
            claims = self.token_manager(request).validate(token)
        except ExpiredTokenError:
            raise _unauthorized("TOKEN_EXPIRED", "Token has expired")
        except InvalidTokenError as exc:
            self.logger.debug("Rejected %s token: %s", self.namespace.value, exc)
            raise _unauthorized("INVALID_TOKEN", "Invalid token")

        identity = AuthIdentity(
            id=claims.identity_id,
            email=claims.email,
            role=claims.extra.get("role"),
            company_id=claims.extra.get("company_id"),
            namespace=self.namespace,
        )
        request.state.identity = identity
        return identity


require_admin = BearerAuthGate(TokenNamespace.admin)
require_user = BearerAuthGate(TokenNamespace.user)
