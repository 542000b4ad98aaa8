"""
Create Company Use Case

Creates a tenant and its owner admin atomically.
"""

import logging
from typing import Optional

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import AdminRole, Company, CompanyAdmin, CompanyStatus
from fleetadmin.libs.result import Error, Result, Return
from fleetadmin.app.use_cases.admins.dtos import CompanyAdminResponse
from .dtos import CompanyResponse, CompanyWithOwnerResponse, CreateCompanyCommand

DUPLICATE_OWNER_EMAIL = Error("DUPLICATE_OWNER_EMAIL", "Owner email already exists")


class CreateCompanyUseCase:
    """
    Use case for creating a company with its owner.

    Business Rules:
    - Owner email must not belong to any existing admin
    - Company starts active; owner is active with role=owner
    - Company and owner are written in a single transaction
    - If the owner cannot be written, no company row survives
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasher,
        logger: Optional[logging.Logger] = None,
    ):
        self.uow = uow
        self.hasher = hasher
        self.logger = logger or logging.getLogger(__name__)

    async def execute(
        self, command: CreateCompanyCommand
    ) -> Result[CompanyWithOwnerResponse]:
        """
        Execute create company use case.

        Args:
            command: Company attributes plus owner credentials

        Returns:
            Result[CompanyWithOwnerResponse] with the company and its owner
        """
        # Hash before opening the transaction; bcrypt is slow
        password_hash = await self.hasher.hash(command.owner_password)

        async with self.uow:
            # 1. Owner email must be free
            existing = await self.uow.admins.get_by_email(command.owner_email)
            if existing:
                return Return.err(DUPLICATE_OWNER_EMAIL)

            # 2. Company
            company = Company(**command.company_values(), status=CompanyStatus.active)
            company = await self.uow.companies.create(company)

            # 3. Owner
            owner = CompanyAdmin(
                company_id=company.id,
                full_name=command.owner_name,
                email=command.owner_email,
                phone=command.owner_phone,
                password_hash=password_hash,
                role=AdminRole.owner,
                is_active=True,
            )
            try:
                owner = await self.uow.admins.create(owner)
            except DuplicateEntityError:
                # Lost a race on the owner email after the check above
                await self._rollback(company.id)
                return Return.err(DUPLICATE_OWNER_EMAIL)

            await self.uow.commit()

            self.logger.info(
                "Company %s created with owner %s", company.id, owner.id
            )

            return Return.ok(
                CompanyWithOwnerResponse(
                    company=CompanyResponse.model_validate(company),
                    owner=CompanyAdminResponse.model_validate(owner),
                )
            )

    async def _rollback(self, company_id: int) -> None:
        try:
            await self.uow.rollback()
        except Exception:
            self.logger.exception(
                "Rollback failed after owner creation error for company %s",
                company_id,
            )
