"""
Create Driver Use Case

Registers a driver under an active company.
"""

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import CompanyStatus, Driver, DriverStatus, OnlineStatus
from fleetadmin.libs.result import Result, Return
from .dtos import CreateDriverCommand, DriverResponse
from .errors import (
    COMPANY_NOT_FOUND,
    COMPANY_SUSPENDED,
    DUPLICATE_DRIVER_PHONE,
    driver_limit_reached,
)


class CreateDriverUseCase:
    """
    Create a driver.

    Business Rules:
    - Company must exist and be active
    - Company must be below max_allowed_drivers
    - Phone is unique within the company
    - New drivers start active and offline with rating 0
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: CreateDriverCommand) -> Result[DriverResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(command.company_id)
            if not company:
                return Return.err(COMPANY_NOT_FOUND)
            if company.status == CompanyStatus.suspended:
                return Return.err(COMPANY_SUSPENDED)

            current = await self.uow.drivers.count_by_company(company.id)
            if current >= company.max_allowed_drivers:
                return Return.err(driver_limit_reached(company.max_allowed_drivers))

            if await self.uow.drivers.get_by_phone(command.phone, company.id):
                return Return.err(DUPLICATE_DRIVER_PHONE)

            driver = Driver(
                company_id=company.id,
                store_id=command.store_id,
                full_name=command.full_name,
                phone=command.phone,
                email=command.email,
                password_hash=await self.hasher.hash(command.password),
                status=DriverStatus.active,
                online_status=OnlineStatus.offline,
                rating=0.0,
                profile_photo=command.profile_photo,
            )
            try:
                driver = await self.uow.drivers.create(driver)
            except DuplicateEntityError:
                await self.uow.rollback()
                return Return.err(DUPLICATE_DRIVER_PHONE)

            await self.uow.commit()

            return Return.ok(DriverResponse.model_validate(driver))
