"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.error import NotFoundError
from accounts.domain.model.user import User
from accounts.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    async def get(self, user_id: UserId) -> User:
        """Load a user that must exist.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their confirmed email.

        Args:
            email: The email address

        Returns:
            The user if found, None otherwise
        """
        pass

    async def has_by_email(self, email: Email) -> bool:
        """Check whether any user owns this email."""
        return await self.find_by_email(email) is not None

    @abstractmethod
    async def find_by_confirm_token(self, token: str) -> Optional[User]:
        """Find a user awaiting sign-up confirmation with this token."""
        pass

    @abstractmethod
    async def find_by_reset_token(self, token: str) -> Optional[User]:
        """Find a user by their pending reset password token."""
        pass

    @abstractmethod
    async def find_by_network_identity(
        self, network: str, identity: str
    ) -> Optional[User]:
        """Find a user by an attached social network identity.

        Args:
            network: Social network name
            identity: The user's ID on that network

        Returns:
            The user if found, None otherwise
        """
        pass

    async def has_by_network_identity(self, network: str, identity: str) -> bool:
        """Check whether a social network identity is attached to any user."""
        return await self.find_by_network_identity(network, identity) is not None

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
