"""
Create User / Register User Use Cases

Both create an end user; registration also signs the new user in.
"""

from fleetadmin.app.repositories.errors import DuplicateEntityError
from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.token_manager import TokenManager
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.domain.entities import User
from fleetadmin.libs.result import Result, Return
from .dtos import CreateUserCommand, RegisterUserCommand, UserAuthResponse, UserResponse
from .errors import EMAIL_ALREADY_EXISTS


class CreateUserUseCase:
    """
    Create an end user.

    Business Rules:
    - Email must be unique (soft-deleted users still hold their email)
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: CreateUserCommand) -> Result[UserResponse]:
        password_hash = await self.hasher.hash(command.password)

        async with self.uow:
            if await self.uow.users.get_by_email(command.email):
                return Return.err(EMAIL_ALREADY_EXISTS)

            user = User(name=command.name, email=command.email, password_hash=password_hash)
            try:
                user = await self.uow.users.create(user)
            except DuplicateEntityError:
                await self.uow.rollback()
                return Return.err(EMAIL_ALREADY_EXISTS)

            await self.uow.commit()

            return Return.ok(UserResponse.model_validate(user))


class RegisterUserUseCase:
    """Self-registration: create the user, then issue a user-namespace token"""

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenManager):
        self.create_user = CreateUserUseCase(uow, hasher)
        self.tokens = tokens

    async def execute(self, command: RegisterUserCommand) -> Result[UserAuthResponse]:
        result = await self.create_user.execute(command)
        if result.is_err():
            return result

        user = result.value
        token = self.tokens.issue(user.id, {"email": user.email})
        return Return.ok(UserAuthResponse(user=user, token=token))
