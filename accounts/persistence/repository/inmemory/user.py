"""In-memory user repository for testing."""

from typing import Optional

from accounts.domain.model.user import User
from accounts.domain.repository.user import UserRepository
from accounts.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def all(self) -> list[User]:
        """Every stored user, in insertion order."""
        return list(self._users.values())

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_confirm_token(self, token: str) -> Optional[User]:
        for user in self._users.values():
            if user.confirm_token is not None and user.confirm_token == token:
                return user
        return None

    async def find_by_reset_token(self, token: str) -> Optional[User]:
        for user in self._users.values():
            reset = user.reset_password_token
            if reset is not None and reset.token == token:
                return user
        return None

    async def find_by_network_identity(
        self, network: str, identity: str
    ) -> Optional[User]:
        for user in self._users.values():
            if any(n.matches(network, identity) for n in user.networks):
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
