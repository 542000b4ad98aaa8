from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from .errors import DRIVER_NOT_FOUND


class DeleteDriverUseCase:
    """Hard delete a driver together with its shifts"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, driver_id: int) -> Result[None]:
        async with self.uow:
            driver = await self.uow.drivers.get_by_id(driver_id)
            if not driver:
                return Return.err(DRIVER_NOT_FOUND)

            await self.uow.drivers.delete(driver)
            await self.uow.commit()

            return Return.ok(None)
