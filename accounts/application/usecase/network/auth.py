"""Sign in or sign up by social network use case."""

import logfire
from pydantic import BaseModel, Field

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.domain.model import User
from accounts.domain.repository import Flusher
from accounts.domain.service import UserService
from accounts.domain.value import Name, new_user_id


class NetworkAuthRequest(BaseModel):
    """Identity reported by a social network after OAuth."""

    network: str = Field(min_length=1, max_length=32)
    identity: str = Field(min_length=1, max_length=255)
    first_name: str
    last_name: str


class NetworkAuthResponse(UserStateResponse):
    created: bool


class NetworkAuthUseCase(BaseUseCase):
    """Finds the user owning a network identity, registering one if needed."""

    def __init__(self, user_service: UserService, flusher: Flusher) -> None:
        self.user_service = user_service
        self.flusher = flusher

    async def execute(self, request: NetworkAuthRequest) -> NetworkAuthResponse:
        with logfire.span(
            "network_auth", network=request.network, identity=request.identity
        ):
            user = await self.user_service.find_by_network_identity(
                request.network, request.identity
            )
            if user:
                return NetworkAuthResponse(
                    **UserStateResponse.from_user(user).model_dump(), created=False
                )

            user = User.sign_up_by_network(
                id=new_user_id(),
                register_date=self.now(),
                name=Name(first=request.first_name, last=request.last_name),
                network=request.network,
                identity=request.identity,
            )
            await self.user_service.save(user)
            await self.flusher.flush()

            logfire.info(
                "User signed up by network",
                user_id=str(user.id),
                network=request.network,
            )
            return NetworkAuthResponse(
                **UserStateResponse.from_user(user).model_dump(), created=True
            )
