"""Request authentication helpers shared by the routers."""

from fastapi import Response

from accounts.application.query import DetailsView
from accounts.config import Settings
from accounts.domain.error import NotAuthorizedError

AUTH_COOKIE = "auth_token"


def require_admin(user: DetailsView, action: str) -> None:
    """Raise NotAuthorizedError unless the user has the admin role."""
    if not user.role.is_admin:
        raise NotAuthorizedError(str(user.id), action)


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.api.protocol == "https",
        samesite="lax",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(key=AUTH_COOKIE)
