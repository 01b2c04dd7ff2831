"""Strongly typed identifiers for account entities."""

from typing import NewType
from uuid import UUID, uuid4

UserId = NewType("UserId", UUID)
GroupId = NewType("GroupId", UUID)
MemberId = NewType("MemberId", UUID)


def new_user_id() -> UserId:
    """Generate a fresh user identifier."""
    return UserId(uuid4())
