from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from .dtos import DriverResponse, UpdateDriverCommand
from .errors import DRIVER_NOT_FOUND, DUPLICATE_DRIVER_PHONE


class UpdateDriverUseCase:
    """Partial driver update; a new phone must stay unique within the company"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, driver_id: int, command: UpdateDriverCommand
    ) -> Result[DriverResponse]:
        async with self.uow:
            driver = await self.uow.drivers.get_by_id(driver_id)
            if not driver:
                return Return.err(DRIVER_NOT_FOUND)

            changes = command.model_dump(exclude_unset=True, exclude_none=True)

            new_phone = changes.get("phone")
            if new_phone and new_phone != driver.phone:
                other = await self.uow.drivers.get_by_phone(new_phone, driver.company_id)
                if other and other.id != driver.id:
                    return Return.err(DUPLICATE_DRIVER_PHONE)

            for field, value in changes.items():
                setattr(driver, field, value)

            try:
                driver = await self.uow.drivers.update(driver)
            except DuplicateEntityError:
                await self.uow.rollback()
                return Return.err(DUPLICATE_DRIVER_PHONE)

            await self.uow.commit()

            return Return.ok(DriverResponse.model_validate(driver))
