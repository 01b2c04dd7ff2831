"""Create user use case."""

import logfire
from pydantic import BaseModel

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.error import BusinessRuleViolationError
from accounts.domain.model import User
from accounts.domain.repository import Flusher
from accounts.domain.service import PasswordHasher, UserService
from accounts.domain.value import Email, Name, new_user_id


class CreateUserRequest(BaseModel):
    """Account provisioned by an administrator."""

    email: str
    first_name: str
    last_name: str


class CreateUserUseCase(BaseUseCase):
    """Provisions an active account with a generated password.

    The user is expected to choose a password through the reset flow.
    """

    def __init__(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        flusher: Flusher,
    ) -> None:
        self.user_service = user_service
        self.password_hasher = password_hasher
        self.flusher = flusher

    async def execute(self, request: CreateUserRequest) -> UserStateResponse:
        email = Email(request.email)

        with logfire.span("create_user", email=email.root):
            if await self.user_service.email_in_use(email):
                raise BusinessRuleViolationError("User with this email already exists.")

            user = User.create(
                id=new_user_id(),
                register_date=self.now(),
                name=Name(first=request.first_name, last=request.last_name),
                email=email,
                password_hash=self.password_hasher.hash(
                    self.password_hasher.generate_password()
                ),
            )

            await self.user_service.save(user)
            await self.flusher.flush()

            logfire.info("User created", user_id=str(user.id))
            return UserStateResponse.from_user(user)
