"""Role and status management use cases."""

from abc import abstractmethod
from uuid import UUID

import logfire
from pydantic import BaseModel

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.model import User
from accounts.domain.repository import Flusher
from accounts.domain.service import UserService
from accounts.domain.value import Role, UserId


class UserIdRequest(BaseModel):
    user_id: UUID


class ChangeRoleRequest(UserIdRequest):
    role: Role


class _UserTransitionUseCase(BaseUseCase):
    """Loads a user, applies one transition, saves and flushes."""

    span_name: str

    def __init__(self, user_service: UserService, flusher: Flusher) -> None:
        self.user_service = user_service
        self.flusher = flusher

    @abstractmethod
    def apply(self, user: User, request: UserIdRequest) -> User:
        """Return the next state of the user."""
        pass

    async def execute(self, request: UserIdRequest) -> UserStateResponse:
        with logfire.span(self.span_name, user_id=str(request.user_id)):
            user = await self.user_service.get_by_id(UserId(request.user_id))
            user = self.apply(user, request)

            await self.user_service.save(user)
            await self.flusher.flush()

            logfire.info(
                "User updated",
                user_id=str(user.id),
                status=user.status.value,
                role=user.role.value,
            )
            return UserStateResponse.from_user(user)


class ActivateUserUseCase(_UserTransitionUseCase):
    span_name = "activate_user"

    def apply(self, user: User, request: UserIdRequest) -> User:
        return user.activate()


class BlockUserUseCase(_UserTransitionUseCase):
    span_name = "block_user"

    def apply(self, user: User, request: UserIdRequest) -> User:
        return user.block()


class ChangeRoleUseCase(_UserTransitionUseCase):
    span_name = "change_role"

    def apply(self, user: User, request: ChangeRoleRequest) -> User:
        return user.change_role(request.role)
