"""Login use case."""

import logfire
from pydantic import BaseModel

from accounts.application.query import UserFetcher
from accounts.application.usecase.base import BaseUseCase
from accounts.domain.error import AuthenticationError
from accounts.domain.service import JWTService, PasswordHasher
from accounts.domain.value import Role, UserStatus


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    user_id: str
    name: str
    role: Role
    token: str


class LoginUseCase(BaseUseCase):
    """Checks email and password and issues a session token."""

    def __init__(
        self,
        user_fetcher: UserFetcher,
        password_hasher: PasswordHasher,
        jwt_service: JWTService,
    ) -> None:
        self.user_fetcher = user_fetcher
        self.password_hasher = password_hasher
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Look up credentials by email
        2. Verify the password against the stored hash
        3. Refuse users who are not active
        4. Issue JWT

        Raises:
            AuthenticationError: If credentials are wrong or the user is not active
        """
        with logfire.span("login", email=request.email):
            view = await self.user_fetcher.find_for_auth(request.email)

            if not view or not self.password_hasher.verify(
                request.password, view.password_hash
            ):
                logfire.warn("Login failed", email=request.email)
                raise AuthenticationError("Incorrect email or password.")

            if view.status is UserStatus.WAIT:
                raise AuthenticationError("User is not confirmed.")
            if view.status is UserStatus.BLOCKED:
                raise AuthenticationError("User is blocked.")

            token = self.jwt_service.create_token(str(view.id), view.role.value)
            logfire.info("User logged in", user_id=str(view.id))

            return LoginResponse(
                user_id=str(view.id), name=view.name, role=view.role, token=token
            )
