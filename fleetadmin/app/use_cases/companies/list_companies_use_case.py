from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from fleetadmin.app.use_cases.pagination import total_pages
from .dtos import CompanyResponse, ListCompaniesQuery, PaginatedCompaniesResponse


class ListCompaniesUseCase:
    """Paginated company listing, newest first, filterable by status and search"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, query: ListCompaniesQuery) -> Result[PaginatedCompaniesResponse]:
        async with self.uow:
            companies, total = await self.uow.companies.list(
                page=query.page,
                limit=query.limit,
                status=query.status,
                search=query.search,
            )

            return Return.ok(
                PaginatedCompaniesResponse(
                    companies=[CompanyResponse.model_validate(c) for c in companies],
                    total_count=total,
                    page=query.page,
                    limit=query.limit,
                    total_pages=total_pages(total, query.limit),
                )
            )
