"""Reset password use case."""

import logfire
from pydantic import BaseModel, Field

from accounts.application.usecase.base import BaseUseCase
from accounts.domain.repository import Flusher
from accounts.domain.service import PasswordHasher, UserService


class ResetPasswordRequest(BaseModel):
    """New password for the holder of a reset token."""

    token: str = Field(min_length=1)
    password: str = Field(min_length=6, max_length=255)


class ResetPasswordUseCase(BaseUseCase):
    """Sets a new password using a pending reset token."""

    def __init__(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        flusher: Flusher,
    ) -> None:
        self.user_service = user_service
        self.password_hasher = password_hasher
        self.flusher = flusher

    async def execute(self, request: ResetPasswordRequest) -> None:
        """Execute password reset.

        Raises:
            NotFoundError: If the token is unknown
            InvalidOperationError: If the token has expired
        """
        with logfire.span("reset_password"):
            user = await self.user_service.get_by_reset_token(request.token)
            user = user.password_reset(
                self.now(), self.password_hasher.hash(request.password)
            )

            await self.user_service.save(user)
            await self.flusher.flush()

            logfire.info("Password reset", user_id=str(user.id))
