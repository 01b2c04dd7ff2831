"""Get current user use case."""

from uuid import UUID

import logfire

from accounts.application.query import DetailsView, UserFetcher
from accounts.application.usecase.base import BaseUseCase
from accounts.domain.error import AuthenticationError
from accounts.domain.service import JWTService
from accounts.domain.value import UserStatus
from accounts.util.error import JWTError


class GetCurrentUserUseCase(BaseUseCase):
    """Resolves a session token to the active user it belongs to.

    Role and status are read from storage on every call, so a block or
    role change takes effect before the token expires.
    """

    def __init__(self, jwt_service: JWTService, user_fetcher: UserFetcher) -> None:
        self.jwt_service = jwt_service
        self.user_fetcher = user_fetcher

    async def execute(self, token: str | None) -> DetailsView:
        """Resolve the token.

        Raises:
            AuthenticationError: If the token is missing or invalid, or the
                user no longer exists or is not active
        """
        if not token:
            raise AuthenticationError("Not authenticated")

        try:
            payload = self.jwt_service.verify_token(token)
        except JWTError as e:
            raise AuthenticationError(str(e)) from e

        with logfire.span("get_current_user", user_id=payload.user_id):
            try:
                user_id = UUID(payload.user_id)
            except ValueError as e:
                raise AuthenticationError("Invalid token") from e

            details = await self.user_fetcher.find_details(user_id)
            if details is None or details.status is not UserStatus.ACTIVE:
                raise AuthenticationError("Not authenticated")
            return details
