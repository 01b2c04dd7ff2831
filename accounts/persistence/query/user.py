"""PostgreSQL implementation of the user read model."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.application.query.user import (
    AuthView,
    DetailsView,
    Page,
    ShortView,
    SocialNetworkView,
    UserFetcher,
    UserFilter,
    UserListItem,
    check_sort,
)
from accounts.persistence.tables import user_networks_table, users_table

users = users_table
networks = user_networks_table

FULL_NAME = func.concat(users.c.name_first, " ", users.c.name_last)
DISPLAY_NAME = func.trim(FULL_NAME)


def apply_filter(stmt: Select, filter: UserFilter) -> Select:
    """Restrict a users query; name and email match literal substrings."""
    if filter.name:
        stmt = stmt.where(
            func.lower(FULL_NAME).contains(filter.name.lower(), autoescape=True)
        )
    if filter.email:
        stmt = stmt.where(
            func.lower(users.c.email).contains(filter.email.lower(), autoescape=True)
        )
    if filter.status:
        stmt = stmt.where(users.c.status == filter.status.value)
    if filter.role:
        stmt = stmt.where(users.c.role == filter.role.value)
    return stmt


class PostgresUserFetcher(UserFetcher):
    """Builds user views with SQL queries."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists_by_reset_token(self, token: str) -> bool:
        count = await self.session.scalar(
            select(func.count())
            .select_from(users)
            .where(users.c.reset_password_token == token)
        )
        return bool(count)

    def _auth_columns(self):
        return (
            users.c.id,
            users.c.email,
            users.c.password_hash,
            DISPLAY_NAME.label("name"),
            users.c.role,
            users.c.status,
        )

    async def find_for_auth(self, email: str) -> Optional[AuthView]:
        result = await self.session.execute(
            select(*self._auth_columns()).where(users.c.email == email.lower())
        )
        row = result.mappings().first()
        return AuthView(**row) if row else None

    async def find_for_auth_by_network(
        self, network: str, identity: str
    ) -> Optional[AuthView]:
        stmt = (
            select(*self._auth_columns())
            .select_from(users.join(networks, networks.c.user_id == users.c.id))
            .where(networks.c.network == network)
            .where(networks.c.identity == identity)
        )
        row = (await self.session.execute(stmt)).mappings().first()
        return AuthView(**row) if row else None

    async def find_by_email(self, email: str) -> Optional[ShortView]:
        stmt = select(users.c.id, users.c.email, users.c.role, users.c.status).where(
            users.c.email == email.lower()
        )
        row = (await self.session.execute(stmt)).mappings().first()
        return ShortView(**row) if row else None

    async def find_by_confirm_token(self, token: str) -> Optional[ShortView]:
        stmt = select(users.c.id, users.c.email, users.c.role, users.c.status).where(
            users.c.confirm_token == token
        )
        row = (await self.session.execute(stmt)).mappings().first()
        return ShortView(**row) if row else None

    async def find_details(self, user_id: UUID) -> Optional[DetailsView]:
        stmt = select(
            users.c.id,
            users.c.register_date,
            users.c.email,
            users.c.role,
            users.c.status,
            users.c.name_first.label("first_name"),
            users.c.name_last.label("last_name"),
        ).where(users.c.id == user_id)
        row = (await self.session.execute(stmt)).mappings().first()
        if not row:
            return None

        network_rows = await self.session.execute(
            select(networks.c.network, networks.c.identity)
            .where(networks.c.user_id == user_id)
            .order_by(networks.c.network)
        )
        return DetailsView(
            **row,
            networks=[SocialNetworkView(**n) for n in network_rows.mappings().all()],
        )

    async def all(
        self,
        filter: UserFilter,
        page: int,
        size: int,
        sort: str,
        direction: str,
    ) -> Page[UserListItem]:
        check_sort(sort)

        stmt = select(
            users.c.id,
            users.c.register_date,
            DISPLAY_NAME.label("name"),
            users.c.email,
            users.c.role,
            users.c.status,
        )

        stmt = apply_filter(stmt, filter)

        total = await self.session.scalar(
            select(func.count()).select_from(stmt.subquery())
        )

        columns = {
            "register_date": users.c.register_date,
            "name": DISPLAY_NAME,
            "email": users.c.email,
            "role": users.c.role,
            "status": users.c.status,
        }
        order = columns[sort].desc() if direction == "desc" else columns[sort].asc()
        stmt = stmt.order_by(order).limit(size).offset((page - 1) * size)

        rows = (await self.session.execute(stmt)).mappings().all()
        return Page[UserListItem](
            items=[UserListItem(**row) for row in rows],
            total=total or 0,
            page=page,
            size=size,
        )
