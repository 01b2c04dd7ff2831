"""Request email change use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.error import BusinessRuleViolationError
from accounts.domain.repository import Flusher
from accounts.domain.service import NotificationService, Tokenizer, UserService
from accounts.domain.value import Email, UserId


class EmailChangeRequest(BaseModel):
    """New email for a signed-in user."""

    user_id: UUID
    email: str


class RequestEmailChangeUseCase(BaseUseCase):
    """Stores a pending email change and mails the token to the new address."""

    def __init__(
        self,
        user_service: UserService,
        tokenizer: Tokenizer,
        notification_service: NotificationService,
        flusher: Flusher,
    ) -> None:
        self.user_service = user_service
        self.tokenizer = tokenizer
        self.notification_service = notification_service
        self.flusher = flusher

    async def execute(self, request: EmailChangeRequest) -> UserStateResponse:
        """Execute email change request.

        Raises:
            BusinessRuleViolationError: If the email belongs to another user
            InvalidOperationError: If the email is unchanged
            InvalidOperationError: If the user is not active
        """
        email = Email(request.email)

        with logfire.span(
            "request_email_change", user_id=str(request.user_id), email=email.root
        ):
            user = await self.user_service.get_by_id(UserId(request.user_id))
            if user.email != email and await self.user_service.email_in_use(email):
                raise BusinessRuleViolationError("Email is already in use.")

            token = self.tokenizer.new_email_token()
            user = user.request_email_changing(email, token)

            await self.user_service.save(user)
            await self.notification_service.send_new_email_token(email, token)
            await self.flusher.flush()
            return UserStateResponse.from_user(user)
