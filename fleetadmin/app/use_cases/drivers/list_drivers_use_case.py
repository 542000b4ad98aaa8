from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from fleetadmin.app.use_cases.pagination import total_pages
from .dtos import DriverResponse, ListDriversQuery, PaginatedDriversResponse


class ListDriversUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: ListDriversQuery) -> Result[PaginatedDriversResponse]:
        async with self.uow:
            drivers, total = await self.uow.drivers.list(
                page=query.page,
                limit=query.limit,
                company_id=query.company_id,
                store_id=query.store_id,
                status=query.status,
                online_status=query.online_status,
                search=query.search,
            )

            return Return.ok(
                PaginatedDriversResponse(
                    drivers=[DriverResponse.model_validate(d) for d in drivers],
                    total_count=total,
                    page=query.page,
                    limit=query.limit,
                    total_pages=total_pages(total, query.limit),
                )
            )
