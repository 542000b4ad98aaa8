from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.base import utcnow
from fleetadmin.libs.result import Result, Return
from .dtos import UpdateUserCommand, UserResponse
from .errors import EMAIL_ALREADY_EXISTS, USER_NOT_FOUND


class UpdateUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, command: UpdateUserCommand) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if not user:
                return Return.err(USER_NOT_FOUND)

            changes = command.model_dump(exclude_unset=True, exclude_none=True)

            new_email = changes.get("email")
            if new_email and new_email != user.email:
                other = await self.uow.users.get_by_email(new_email)
                if other and other.id != user.id:
                    return Return.err(EMAIL_ALREADY_EXISTS)

            for field, value in changes.items():
                setattr(user, field, value)

            try:
                user = await self.uow.users.update(user)
            except DuplicateEntityError:
                await self.uow.rollback()
                return Return.err(EMAIL_ALREADY_EXISTS)

            await self.uow.commit()

            return Return.ok(UserResponse.model_validate(user))


class DeleteUserUseCase:
    """Soft delete: the row stays, but every lookup stops returning it"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if not user:
                return Return.err(USER_NOT_FOUND)

            user.deleted_at = utcnow()
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(None)
