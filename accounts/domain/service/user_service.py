"""User domain service."""

import logfire

from accounts.domain.error import NotFoundError
from accounts.domain.model import User
from accounts.domain.repository import UserRepository
from accounts.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups and persistence."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_email(self, email: Email) -> User:
        """Get user by email.

        Raises:
            NotFoundError: If no user owns this email
        """
        with logfire.span("user_service.get_by_email", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("User not found", email=email.root)
                raise NotFoundError("User", email.root)
            return user

    async def email_in_use(self, email: Email) -> bool:
        """Check whether any user owns this email."""
        with logfire.span("user_service.email_in_use", email=email.root):
            return await self.user_repository.has_by_email(email)

    async def get_by_confirm_token(self, token: str) -> User:
        """Get the user awaiting confirmation with this token.

        Raises:
            NotFoundError: If the token is unknown or already used
        """
        with logfire.span("user_service.get_by_confirm_token"):
            user = await self.user_repository.find_by_confirm_token(token)
            if not user:
                logfire.warn("Confirm token not found")
                raise NotFoundError("Confirm token", token[:8] + "...")
            return user

    async def get_by_reset_token(self, token: str) -> User:
        """Get the user with this pending reset password token.

        Raises:
            NotFoundError: If the token is unknown or already used
        """
        with logfire.span("user_service.get_by_reset_token"):
            user = await self.user_repository.find_by_reset_token(token)
            if not user:
                logfire.warn("Reset token not found")
                raise NotFoundError("Reset token", token[:8] + "...")
            return user

    async def find_by_network_identity(
        self, network: str, identity: str
    ) -> User | None:
        """Find the user owning a social network identity.

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.find_by_network_identity",
            network=network,
            identity=identity,
        ):
            user = await self.user_repository.find_by_network_identity(
                network, identity
            )
            if user:
                logfire.info(
                    "User found",
                    network=network,
                    identity=identity,
                    user_id=str(user.id),
                )
            return user

    async def save(self, user: User) -> User:
        """Save user (create or update)."""
        with logfire.span(
            "user_service.save", user_id=str(user.id), status=user.status.value
        ):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved
