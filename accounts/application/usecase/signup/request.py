"""Sign up by email use case."""

import logfire
from pydantic import BaseModel, Field

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.error import BusinessRuleViolationError
from accounts.domain.model import User
from accounts.domain.repository import Flusher
from accounts.domain.service import (
    NotificationService,
    PasswordHasher,
    Tokenizer,
    UserService,
)
from accounts.domain.value import Email, Name, new_user_id


class SignUpRequest(BaseModel):
    """Sign up request."""

    email: str
    password: str = Field(min_length=6, max_length=255)
    first_name: str
    last_name: str


class SignUpRequestUseCase(BaseUseCase):
    """Registers a user by email and sends the confirmation link."""

    def __init__(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        tokenizer: Tokenizer,
        notification_service: NotificationService,
        flusher: Flusher,
    ) -> None:
        self.user_service = user_service
        self.password_hasher = password_hasher
        self.tokenizer = tokenizer
        self.notification_service = notification_service
        self.flusher = flusher

    async def execute(self, request: SignUpRequest) -> UserStateResponse:
        """Execute sign up flow.

        Steps:
        1. Reject an email that is already registered
        2. Create the user in ``wait`` status with a confirm token
        3. Send the confirm token to the email
        4. Flush

        Raises:
            BusinessRuleViolationError: If the email is taken
        """
        email = Email(request.email)

        with logfire.span("sign_up_request", email=email.root):
            if await self.user_service.email_in_use(email):
                logfire.warn("Sign up with taken email", email=email.root)
                raise BusinessRuleViolationError("User already exists.")

            token = self.tokenizer.confirm_token()
            user = User.sign_up_by_email(
                id=new_user_id(),
                register_date=self.now(),
                name=Name(first=request.first_name, last=request.last_name),
                email=email,
                password_hash=self.password_hasher.hash(request.password),
                confirm_token=token,
            )

            await self.user_service.save(user)
            await self.notification_service.send_confirm_token(email, token)
            await self.flusher.flush()

            logfire.info("User signed up", user_id=str(user.id))
            return UserStateResponse.from_user(user)
