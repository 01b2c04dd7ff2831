"""Confirm email change use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.error import BusinessRuleViolationError
from accounts.domain.repository import Flusher
from accounts.domain.service import UserService
from accounts.domain.value import UserId


class EmailConfirmRequest(BaseModel):
    user_id: UUID
    token: str = Field(min_length=1)


class ConfirmEmailChangeUseCase(BaseUseCase):
    """Switches the user to the pending email once the token matches."""

    def __init__(self, user_service: UserService, flusher: Flusher) -> None:
        self.user_service = user_service
        self.flusher = flusher

    async def execute(self, request: EmailConfirmRequest) -> UserStateResponse:
        """Execute email change confirmation.

        Raises:
            InvalidOperationError: If no change is pending or the token differs
            BusinessRuleViolationError: If another user took the email meanwhile
        """
        with logfire.span("confirm_email_change", user_id=str(request.user_id)):
            user = await self.user_service.get_by_id(UserId(request.user_id))
            user = user.confirm_email_changing(request.token)

            # The address may have been claimed since the change was requested
            if await self.user_service.email_in_use(user.email):
                raise BusinessRuleViolationError("Email is already in use.")

            await self.user_service.save(user)
            await self.flusher.flush()

            logfire.info("Email changed", user_id=str(user.id))
            return UserStateResponse.from_user(user)
