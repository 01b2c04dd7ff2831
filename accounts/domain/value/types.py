"""Value objects of the user account domain.

Value objects are immutable and defined by their values, not identity.
They validate themselves on construction so the aggregate never holds a
malformed email, name or token.
"""

from datetime import datetime
from enum import Enum

import email_validator
from pydantic import Field, field_validator

from accounts.domain.value.common import RootValueObject, ValueObject


class UserStatus(str, Enum):
    """Lifecycle status of a user account."""

    WAIT = "wait"
    ACTIVE = "active"
    BLOCKED = "blocked"


class Role(str, Enum):
    """Permission level of a user account."""

    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"

    @property
    def is_admin(self) -> bool:
        return self is Role.ADMIN


class Email(RootValueObject[str]):
    """Email address, normalised to lower case."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the address and return its normalised lower-case form."""
        try:
            info = email_validator.validate_email(
                v.strip(), check_deliverability=False
            )
        except email_validator.EmailNotValidError as e:
            raise ValueError(f"Incorrect email: {e}") from e
        if len(info.normalized) > 255:
            raise ValueError("Email must be at most 255 characters")
        return info.normalized.lower()


class Name(ValueObject):
    """Display name of a user."""

    first: str = Field(min_length=1, max_length=255)
    last: str = Field(min_length=1, max_length=255)

    @field_validator("first", "last")
    @classmethod
    def strip_part(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name parts must not be blank")
        return v

    @property
    def full(self) -> str:
        return f"{self.first} {self.last}"


class ResetPasswordToken(ValueObject):
    """Time-limited credential authorising one password change."""

    token: str = Field(min_length=1, max_length=255)
    expires_at: datetime

    def is_expired_to(self, now: datetime) -> bool:
        """Check whether the token is no longer usable at ``now``."""
        return self.expires_at <= now


class SocialNetwork(ValueObject):
    """Identity of a user on an external social network."""

    network: str = Field(min_length=1, max_length=32)
    identity: str = Field(min_length=1, max_length=255)

    def has_name(self, network: str) -> bool:
        return self.network == network

    def matches(self, network: str, identity: str) -> bool:
        return self.network == network and self.identity == identity
