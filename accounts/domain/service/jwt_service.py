"""JWT session token domain service."""

import logfire

from accounts.config import AuthSettings
from accounts.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, role: str) -> str:
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role):
            token = create_token(user_id, role, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise
