"""PostgreSQL implementation of User repository."""

from typing import Optional
from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.domain.model import User
from accounts.domain.repository import UserRepository
from accounts.domain.value import Email, UserId
from accounts.persistence.mappers import row_to_user, user_to_dict
from accounts.persistence.tables import user_networks_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Social networks live in their own table and are rewritten as a whole on
    every save.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        networks = await self.session.execute(
            select(user_networks_table.c.network, user_networks_table.c.identity)
            .where(user_networks_table.c.user_id == row["id"])
            .order_by(user_networks_table.c.network)
        )
        return row_to_user(dict(row), [dict(n) for n in networks.mappings().all()])

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._load(select(users_table).where(users_table.c.id == user_id))

    async def find_by_email(self, email: Email) -> Optional[User]:
        return await self._load(
            select(users_table).where(users_table.c.email == email.root)
        )

    async def find_by_confirm_token(self, token: str) -> Optional[User]:
        return await self._load(
            select(users_table).where(users_table.c.confirm_token == token)
        )

    async def find_by_reset_token(self, token: str) -> Optional[User]:
        return await self._load(
            select(users_table).where(users_table.c.reset_password_token == token)
        )

    async def find_by_network_identity(
        self, network: str, identity: str
    ) -> Optional[User]:
        """Find a user through the networks table.

        Args:
            network: Social network name
            identity: The user's ID on that network

        Returns:
            User if found, None otherwise
        """
        stmt = (
            select(users_table)
            .select_from(
                users_table.join(
                    user_networks_table,
                    users_table.c.id == user_networks_table.c.user_id,
                )
            )
            .where(user_networks_table.c.network == network)
            .where(user_networks_table.c.identity == identity)
        )
        return await self._load(stmt)

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        exists = await self.session.scalar(
            select(users_table.c.id).where(users_table.c.id == user.id)
        )

        user_dict = user_to_dict(user)

        if exists:
            await self.session.execute(
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            await self.session.execute(users_table.insert().values(**user_dict))

        await self.session.execute(
            delete(user_networks_table).where(user_networks_table.c.user_id == user.id)
        )
        if user.networks:
            await self.session.execute(
                user_networks_table.insert(),
                [
                    {
                        "id": uuid4(),
                        "user_id": user.id,
                        "network": n.network,
                        "identity": n.identity,
                    }
                    for n in user.networks
                ],
            )

        await self.session.flush()
        return user
