"""Domain model entities for user accounts."""

from accounts.domain.model.group import Group, Member
from accounts.domain.model.user import User

__all__ = [
    "User",
    "Group",
    "Member",
]
