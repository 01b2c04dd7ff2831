"""Current user profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from accounts.application.query import DetailsView
from accounts.application.usecase.auth import GetCurrentUserUseCase
from accounts.application.usecase.email import (
    ConfirmEmailChangeUseCase,
    EmailChangeRequest,
    EmailConfirmRequest,
    RequestEmailChangeUseCase,
)
from accounts.application.usecase.network import (
    AttachNetworkUseCase,
    DetachNetworkUseCase,
    NetworkRequest,
)
from accounts.application.usecase.response import UserStateResponse
from accounts.application.usecase.user import ChangeNameRequest, ChangeNameUseCase

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class NameAPIRequest(BaseModel):
    first_name: str
    last_name: str


class EmailAPIRequest(BaseModel):
    email: str


class TokenAPIRequest(BaseModel):
    token: str = Field(min_length=1)


class NetworkAPIRequest(BaseModel):
    network: str
    identity: str


@router.get("", response_model=DetailsView)
async def show_profile(
    current_user: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DetailsView:
    return await current_user.execute(auth_token)


@router.patch("/name", response_model=UserStateResponse)
async def change_name(
    request: NameAPIRequest,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[ChangeNameUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    user = await current_user.execute(auth_token)
    return await use_case.execute(
        ChangeNameRequest(
            user_id=user.id,
            first_name=request.first_name,
            last_name=request.last_name,
        )
    )


@router.post("/email", response_model=UserStateResponse)
async def request_email_change(
    request: EmailAPIRequest,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[RequestEmailChangeUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    """Send a confirmation link to the new address.

    The current email stays in use until the link is followed.
    """
    user = await current_user.execute(auth_token)
    return await use_case.execute(
        EmailChangeRequest(user_id=user.id, email=request.email)
    )


@router.post("/email/confirm", response_model=UserStateResponse)
async def confirm_email_change(
    request: TokenAPIRequest,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[ConfirmEmailChangeUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    user = await current_user.execute(auth_token)
    return await use_case.execute(
        EmailConfirmRequest(user_id=user.id, token=request.token)
    )


@router.post("/networks", response_model=UserStateResponse)
async def attach_network(
    request: NetworkAPIRequest,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[AttachNetworkUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    user = await current_user.execute(auth_token)
    return await use_case.execute(
        NetworkRequest(
            user_id=user.id, network=request.network, identity=request.identity
        )
    )


@router.delete("/networks/{network}/{identity}", response_model=UserStateResponse)
async def detach_network(
    network: str,
    identity: str,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[DetachNetworkUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    user = await current_user.execute(auth_token)
    return await use_case.execute(
        NetworkRequest(user_id=user.id, network=network, identity=identity)
    )
