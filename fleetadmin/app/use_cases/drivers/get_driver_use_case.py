from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from .dtos import DriverResponse
from .errors import DRIVER_NOT_FOUND


class GetDriverUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, driver_id: int) -> Result[DriverResponse]:
        async with self.uow:
            driver = await self.uow.drivers.get_by_id(driver_id)
            if not driver:
                return Return.err(DRIVER_NOT_FOUND)

            return Return.ok(DriverResponse.model_validate(driver))
