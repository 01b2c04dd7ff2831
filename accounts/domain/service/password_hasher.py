"""Password hashing domain service."""

import secrets
import string

import logfire
from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError

from accounts.config import AuthSettings

from .base import Service

PASSWORD_ALPHABET = string.ascii_letters + string.digits


class PasswordHasher(Service):
    """Hashes and verifies passwords with Argon2id."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings
        self._hasher = Argon2Hasher()

    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("Password must not be empty")
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Check a password against a stored hash.

        Users signed up by social network have no hash and never match.
        """
        if not password_hash:
            return False
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError) as e:
            logfire.debug("Password verification failed", error=type(e).__name__)
            return False

    def generate_password(self) -> str:
        """Generate a random password for an admin-provisioned account."""
        length = self.auth_settings.generated_password_length
        return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
