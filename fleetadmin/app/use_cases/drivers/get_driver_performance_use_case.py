"""
Get Driver Performance Use Case

Aggregates finished shifts (completed or cancelled) of a driver.
"""

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from .dtos import DriverPerformanceResponse, PerformanceQuery
from .errors import DRIVER_NOT_FOUND


class GetDriverPerformanceUseCase:
    """
    Driver performance summary.

    completion_rate is completed_orders as a percentage of total_orders,
    0 when the driver has no orders in the window.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, driver_id: int, query: PerformanceQuery
    ) -> Result[DriverPerformanceResponse]:
        async with self.uow:
            driver = await self.uow.drivers.get_by_id(driver_id)
            if not driver:
                return Return.err(DRIVER_NOT_FOUND)

            stats = await self.uow.shifts.get_performance(
                driver_id, start_date=query.start_date, end_date=query.end_date
            )

            total_orders = stats["total_orders"]
            completion_rate = 0.0
            if total_orders:
                completion_rate = round(stats["completed_orders"] * 100.0 / total_orders, 2)

            return Return.ok(
                DriverPerformanceResponse(
                    driver_id=driver_id,
                    completion_rate=completion_rate,
                    **stats,
                )
            )
