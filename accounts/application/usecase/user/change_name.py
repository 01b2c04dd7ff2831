"""Change name use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.repository import Flusher
from accounts.domain.service import UserService
from accounts.domain.value import Name, UserId


class ChangeNameRequest(BaseModel):
    user_id: UUID
    first_name: str
    last_name: str


class ChangeNameUseCase(BaseUseCase):
    """Lets a user rename themselves."""

    def __init__(self, user_service: UserService, flusher: Flusher) -> None:
        self.user_service = user_service
        self.flusher = flusher

    async def execute(self, request: ChangeNameRequest) -> UserStateResponse:
        with logfire.span("change_name", user_id=str(request.user_id)):
            user = await self.user_service.get_by_id(UserId(request.user_id))
            user = user.change_name(
                Name(first=request.first_name, last=request.last_name)
            )

            await self.user_service.save(user)
            await self.flusher.flush()
            return UserStateResponse.from_user(user)
