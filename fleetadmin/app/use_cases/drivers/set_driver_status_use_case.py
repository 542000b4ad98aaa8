from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import DriverStatus
from fleetadmin.libs.result import Result, Return
from .dtos import DriverResponse
from .errors import DRIVER_NOT_FOUND


class SetDriverStatusUseCase:
    """
    Block or unblock a driver.

    block -> suspended, unblock -> active. Repeating a transition is a no-op.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, driver_id: int, status: DriverStatus) -> Result[DriverResponse]:
        async with self.uow:
            driver = await self.uow.drivers.get_by_id(driver_id)
            if not driver:
                return Return.err(DRIVER_NOT_FOUND)

            if driver.status != status:
                driver.status = status
                driver = await self.uow.drivers.update(driver)
                await self.uow.commit()

            return Return.ok(DriverResponse.model_validate(driver))
