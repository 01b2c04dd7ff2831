"""Request password reset use case."""

import logfire
from pydantic import BaseModel

from accounts.application.usecase.base import BaseUseCase
from accounts.domain.repository import Flusher
from accounts.domain.service import NotificationService, Tokenizer, UserService
from accounts.domain.value import Email


class ResetRequest(BaseModel):
    """Password reset request."""

    email: str


class ResetRequestUseCase(BaseUseCase):
    """Issues a reset password token and mails it to the user."""

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

    async def execute(self, request: ResetRequest) -> None:
        """Execute reset request.

        Raises:
            NotFoundError: If no user owns the email
            InvalidOperationError: If the user is not active or a reset is pending
        """
        email = Email(request.email)

        with logfire.span("reset_request", email=email.root):
            user = await self.user_service.get_by_email(email)

            now = self.now()
            token = self.tokenizer.reset_token(now)
            user = user.request_password_reset(token, now)

            await self.user_service.save(user)
            await self.notification_service.send_reset_token(email, token.token)
            await self.flusher.flush()

            logfire.info(
                "Password reset requested",
                user_id=str(user.id),
                expires_at=token.expires_at.isoformat(),
            )
