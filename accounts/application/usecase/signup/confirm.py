"""Confirm sign up use case."""

import logfire
from pydantic import BaseModel, Field

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.repository import Flusher
from accounts.domain.service import UserService


class SignUpConfirmRequest(BaseModel):
    """Confirm sign up request."""

    token: str = Field(min_length=1)


class SignUpConfirmUseCase(BaseUseCase):
    """Activates a user who followed the confirmation link."""

    def __init__(self, user_service: UserService, flusher: Flusher) -> None:
        self.user_service = user_service
        self.flusher = flusher

    async def execute(self, request: SignUpConfirmRequest) -> UserStateResponse:
        """Execute confirmation.

        Raises:
            NotFoundError: If the token is unknown
            InvalidOperationError: If the user is already confirmed
        """
        with logfire.span("sign_up_confirm"):
            user = await self.user_service.get_by_confirm_token(request.token)
            user = user.confirm_sign_up()

            await self.user_service.save(user)
            await self.flusher.flush()

            logfire.info("Sign up confirmed", user_id=str(user.id))
            return UserStateResponse.from_user(user)
