"""
Login Admin Use Case

Authenticates a company admin and issues an admin-namespace bearer token.
"""

import logging
from typing import Optional

from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.token_manager import TokenManager
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from .dtos import AdminLoginCommand, AdminLoginResponse, CompanyAdminResponse

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginAdminUseCase:
    """
    Use case for company admin login.

    Business Rules:
    - Unknown email and wrong password return the same error
    - A dummy hash is verified for unknown emails so both paths cost the same
    - Inactive admins get ACCOUNT_INACTIVE, checked before the password
    - Token carries email, role and company_id claims
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasher,
        tokens: TokenManager,
        logger: Optional[logging.Logger] = None,
    ):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens
        self.logger = logger or logging.getLogger(__name__)

    async def execute(self, command: AdminLoginCommand) -> Result[AdminLoginResponse]:
        async with self.uow:
            admin = await self.uow.admins.get_by_email(command.email)

            if admin is None:
                await self.hasher.verify(command.password, self.hasher.dummy_hash)
                return Return.err(INVALID_CREDENTIALS)

            if not admin.is_active:
                self.logger.info("Login refused for inactive admin %s", admin.id)
                return Return.err(Error("ACCOUNT_INACTIVE", "Account is inactive"))

            if not await self.hasher.verify(command.password, admin.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            token = self.tokens.issue(
                admin.id,
                {
                    "email": admin.email,
                    "role": admin.role.value,
                    "company_id": admin.company_id,
                },
            )

            return Return.ok(
                AdminLoginResponse(
                    admin=CompanyAdminResponse.model_validate(admin),
                    token=token,
                )
            )
