"""Edit user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.error import BusinessRuleViolationError
from accounts.domain.repository import Flusher
from accounts.domain.service import UserService
from accounts.domain.value import Email, Name, UserId


class EditUserRequest(BaseModel):
    user_id: UUID
    email: str
    first_name: str
    last_name: str


class EditUserUseCase(BaseUseCase):
    """Overwrites email and name of a user."""

    def __init__(self, user_service: UserService, flusher: Flusher) -> None:
        self.user_service = user_service
        self.flusher = flusher

    async def execute(self, request: EditUserRequest) -> UserStateResponse:
        """Execute edit.

        Raises:
            NotFoundError: If the user does not exist
            BusinessRuleViolationError: If another user owns the email
        """
        email = Email(request.email)
        user_id = UserId(request.user_id)

        with logfire.span("edit_user", user_id=str(user_id)):
            user = await self.user_service.get_by_id(user_id)

            if user.email != email and await self.user_service.email_in_use(email):
                raise BusinessRuleViolationError("Email is already in use.")

            user = user.edit(
                email, Name(first=request.first_name, last=request.last_name)
            )

            await self.user_service.save(user)
            await self.flusher.flush()
            return UserStateResponse.from_user(user)
