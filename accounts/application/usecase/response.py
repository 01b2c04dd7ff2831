"""Responses shared by user use cases."""

from pydantic import BaseModel

from accounts.domain.model import User
from accounts.domain.value import Role, UserStatus


class UserStateResponse(BaseModel):
    """State of a user after a use case changed it."""

    user_id: str
    email: str | None
    name: str
    role: Role
    status: UserStatus

    @classmethod
    def from_user(cls, user: User) -> "UserStateResponse":
        return cls(
            user_id=str(user.id),
            email=user.email.root if user.email else None,
            name=user.name.full,
            role=user.role,
            status=user.status,
        )
