"""
Create Company Admin Use Case

Adds a manager to an existing company.
"""

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import AdminRole, CompanyAdmin
from fleetadmin.libs.result import Error, Result, Return
from .dtos import CompanyAdminResponse, CreateCompanyAdminCommand

DUPLICATE_ADMIN_EMAIL = Error("DUPLICATE_ADMIN_EMAIL", "Admin email already exists")


class CreateCompanyAdminUseCase:
    """
    Add a manager admin to a company.

    Business Rules:
    - Company must exist
    - Email is unique across all admins of all companies
    - Always creates role=manager; the owner is created with the company
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self, company_id: int, command: CreateCompanyAdminCommand
    ) -> Result[CompanyAdminResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            if await self.uow.admins.get_by_email(command.email) is not None:
                return Return.err(DUPLICATE_ADMIN_EMAIL)

            admin = CompanyAdmin(
                company_id=company.id,
                full_name=command.full_name,
                email=command.email,
                phone=command.phone,
                password_hash=await self.hasher.hash(command.password),
                role=AdminRole.manager,
                is_active=True,
            )
            try:
                admin = await self.uow.admins.create(admin)
            except DuplicateEntityError:
                await self.uow.rollback()
                return Return.err(DUPLICATE_ADMIN_EMAIL)

            await self.uow.commit()

            return Return.ok(CompanyAdminResponse.model_validate(admin))
