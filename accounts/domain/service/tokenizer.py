"""Token generation domain service."""

import secrets
from datetime import datetime, timedelta

from accounts.config import AuthSettings
from accounts.domain.value import ResetPasswordToken

from .base import Service


class Tokenizer(Service):
    """Generates the single-use tokens sent to users by email."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def confirm_token(self) -> str:
        """Token proving email ownership during sign-up."""
        return secrets.token_urlsafe(self.auth_settings.token_bytes)

    def new_email_token(self) -> str:
        """Token confirming a requested email change."""
        return secrets.token_urlsafe(self.auth_settings.token_bytes)

    def reset_token(self, now: datetime) -> ResetPasswordToken:
        """Reset password token valid for the configured TTL from ``now``."""
        return ResetPasswordToken(
            token=secrets.token_urlsafe(self.auth_settings.token_bytes),
            expires_at=now + timedelta(seconds=self.auth_settings.reset_token_ttl_seconds),
        )
