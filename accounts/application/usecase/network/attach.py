"""Attach social network use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.error import BusinessRuleViolationError
from accounts.domain.repository import Flusher
from accounts.domain.service import UserService
from accounts.domain.value import UserId


class NetworkRequest(BaseModel):
    """Social network identity of a signed-in user."""

    user_id: UUID
    network: str = Field(min_length=1, max_length=32)
    identity: str = Field(min_length=1, max_length=255)


class AttachNetworkUseCase(BaseUseCase):
    """Links a social network identity to an existing user."""

    def __init__(self, user_service: UserService, flusher: Flusher) -> None:
        self.user_service = user_service
        self.flusher = flusher

    async def execute(self, request: NetworkRequest) -> UserStateResponse:
        """Attach the identity.

        Raises:
            BusinessRuleViolationError: If any user already owns the identity
            InvalidOperationError: If the user already has this network
        """
        with logfire.span(
            "attach_network", user_id=str(request.user_id), network=request.network
        ):
            owner = await self.user_service.find_by_network_identity(
                request.network, request.identity
            )
            if owner:
                raise BusinessRuleViolationError("Profile is already in use.")

            user = await self.user_service.get_by_id(UserId(request.user_id))
            user = user.attach_network(request.network, request.identity)

            await self.user_service.save(user)
            await self.flusher.flush()
            return UserStateResponse.from_user(user)
