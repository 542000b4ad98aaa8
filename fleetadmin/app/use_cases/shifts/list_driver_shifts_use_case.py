from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Error, Result, Return
from fleetadmin.app.use_cases.pagination import total_pages
from .dtos import ListShiftsQuery, PaginatedShiftsResponse, ShiftResponse


class ListDriverShiftsUseCase:
    """
    Paginated shift history of a driver, most recent shift first.

    Filters: company_id, status and an inclusive shift_date window.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, driver_id: int, query: ListShiftsQuery
    ) -> Result[PaginatedShiftsResponse]:
        async with self.uow:
            driver = await self.uow.drivers.get_by_id(driver_id)
            if not driver:
                return Return.err(Error("DRIVER_NOT_FOUND", "Driver not found"))

            shifts, total = await self.uow.shifts.list_by_driver(
                driver_id,
                page=query.page,
                limit=query.limit,
                company_id=query.company_id,
                status=query.status,
                start_date=query.start_date,
                end_date=query.end_date,
            )

            return Return.ok(
                PaginatedShiftsResponse(
                    shifts=[ShiftResponse.from_entity(s) for s in shifts],
                    total_count=total,
                    page=query.page,
                    limit=query.limit,
                    total_pages=total_pages(total, query.limit),
                )
            )
