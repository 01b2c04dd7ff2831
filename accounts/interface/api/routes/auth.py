"""Authentication and registration routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status

from accounts.application.query import DetailsView
from accounts.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)
from accounts.application.usecase.network import (
    NetworkAuthRequest,
    NetworkAuthResponse,
    NetworkAuthUseCase,
)
from accounts.application.usecase.reset import (
    ResetPasswordRequest,
    ResetPasswordUseCase,
    ResetRequest,
    ResetRequestUseCase,
)
from accounts.application.usecase.response import UserStateResponse
from accounts.application.usecase.signup import (
    SignUpConfirmRequest,
    SignUpConfirmUseCase,
    SignUpRequest,
    SignUpRequestUseCase,
)
from accounts.config import Settings
from accounts.domain.error import AuthenticationError
from accounts.domain.service import JWTService
from accounts.domain.value import UserStatus
from accounts.interface.api.security import clear_auth_cookie, set_auth_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post(
    "/signup",
    response_model=UserStateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def sign_up(
    request: SignUpRequest,
    use_case: FromDishka[SignUpRequestUseCase],
) -> UserStateResponse:
    """Register by email.

    The account stays in ``wait`` status until the link from the
    confirmation email is followed.

    Example:
        POST /auth/signup
        {
            "email": "alice@example.com",
            "password": "secret-password",
            "first_name": "Alice",
            "last_name": "Smith"
        }
    """
    return await use_case.execute(request)


@router.post("/signup/confirm", response_model=UserStateResponse)
async def confirm_sign_up(
    request: SignUpConfirmRequest,
    use_case: FromDishka[SignUpConfirmUseCase],
) -> UserStateResponse:
    return await use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Sign in with email and password.

    The session token is returned in the body and set as an HTTP-only
    ``auth_token`` cookie.
    """
    result = await use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    return result


@router.post("/network", response_model=NetworkAuthResponse)
async def network_auth(
    request: NetworkAuthRequest,
    response: Response,
    use_case: FromDishka[NetworkAuthUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> NetworkAuthResponse:
    """Sign in (or sign up) with a social network identity."""
    result = await use_case.execute(request)
    if result.status is not UserStatus.ACTIVE:
        raise AuthenticationError("User is blocked.")

    token = jwt_service.create_token(result.user_id, result.role.value)
    set_auth_cookie(response, token, settings)
    logger.info(f"User {result.user_id} signed in with {request.network}")
    return result


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(response: Response) -> None:
    clear_auth_cookie(response)


@router.get("/me", response_model=DetailsView)
async def get_me(
    use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DetailsView:
    """Current user, resolved from the ``auth_token`` cookie."""
    return await use_case.execute(auth_token)


@router.post("/reset", status_code=status.HTTP_204_NO_CONTENT)
async def request_reset(
    request: ResetRequest,
    use_case: FromDishka[ResetRequestUseCase],
) -> None:
    """Send a reset password link to the given email."""
    await use_case.execute(request)


@router.post("/reset/confirm", status_code=status.HTTP_204_NO_CONTENT)
async def reset_password(
    request: ResetPasswordRequest,
    use_case: FromDishka[ResetPasswordUseCase],
) -> None:
    await use_case.execute(request)
