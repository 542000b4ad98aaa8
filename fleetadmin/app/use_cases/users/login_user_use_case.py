from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.token_manager import TokenManager
from fleetadmin.app.services.unit_of_work import UnitOfWork
from fleetadmin.libs.result import Result, Return
from .dtos import LoginUserCommand, UserAuthResponse, UserResponse
from .errors import INVALID_CREDENTIALS


class LoginUserUseCase:
    """
    End user login.

    Unknown email and wrong password produce the same error, and the unknown
    email path still pays for one bcrypt verification.
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenManager):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, command: LoginUserCommand) -> Result[UserAuthResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                await self.hasher.verify(command.password, self.hasher.dummy_hash)
                return Return.err(INVALID_CREDENTIALS)

            if not await self.hasher.verify(command.password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            token = self.tokens.issue(user.id, {"email": user.email})
            return Return.ok(
                UserAuthResponse(user=UserResponse.model_validate(user), token=token)
            )
