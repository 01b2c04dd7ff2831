"""Detach social network use case."""

import logfire

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.network.attach import NetworkRequest
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.repository import Flusher
from accounts.domain.service import UserService
from accounts.domain.value import UserId


class DetachNetworkUseCase(BaseUseCase):
    """Unlinks a social network identity from a user."""

    def __init__(self, user_service: UserService, flusher: Flusher) -> None:
        self.user_service = user_service
        self.flusher = flusher

    async def execute(self, request: NetworkRequest) -> UserStateResponse:
        with logfire.span(
            "detach_network", user_id=str(request.user_id), network=request.network
        ):
            user = await self.user_service.get_by_id(UserId(request.user_id))
            user = user.detach_network(request.network, request.identity)

            await self.user_service.save(user)
            await self.flusher.flush()
            return UserStateResponse.from_user(user)
