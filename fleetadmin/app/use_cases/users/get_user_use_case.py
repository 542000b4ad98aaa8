from typing import List

from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from .dtos import UserResponse
from .errors import USER_NOT_FOUND


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if not user:
                return Return.err(USER_NOT_FOUND)

            return Return.ok(UserResponse.model_validate(user))


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserResponse]]:
        async with self.uow:
            users = await self.uow.users.get_all()
            return Return.ok([UserResponse.model_validate(u) for u in users])
