"""Domain value objects for user accounts."""

from accounts.domain.value.identifiers import GroupId, MemberId, UserId, new_user_id
from accounts.domain.value.types import (
    Email,
    Name,
    ResetPasswordToken,
    Role,
    SocialNetwork,
    UserStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "GroupId",
    "MemberId",
    "new_user_id",
    # Types
    "Email",
    "Name",
    "ResetPasswordToken",
    "Role",
    "SocialNetwork",
    "UserStatus",
]
