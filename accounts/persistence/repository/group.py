"""PostgreSQL implementations of work members repositories."""

from typing import Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.domain.model import Group, Member
from accounts.domain.repository import GroupRepository, MemberRepository
from accounts.domain.value import GroupId
from accounts.persistence.mappers import (
    group_to_dict,
    member_to_dict,
    row_to_group,
)
from accounts.persistence.tables import groups_table, members_table


class PostgresGroupRepository(GroupRepository):
    """PostgreSQL implementation of GroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        result = await self.session.execute(
            select(groups_table).where(groups_table.c.id == group_id)
        )
        row = result.mappings().first()
        return row_to_group(dict(row)) if row else None

    async def save(self, group: Group) -> Group:
        values = group_to_dict(group)
        if await self.find_by_id(group.id):
            stmt = (
                groups_table.update()
                .where(groups_table.c.id == group.id)
                .values(**values)
            )
        else:
            stmt = groups_table.insert().values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return group

    async def remove(self, group: Group) -> None:
        await self.session.execute(
            delete(groups_table).where(groups_table.c.id == group.id)
        )
        await self.session.flush()


class PostgresMemberRepository(MemberRepository):
    """PostgreSQL implementation of MemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def has_by_group(self, group_id: GroupId) -> bool:
        stmt = select(exists().where(members_table.c.group_id == group_id))
        return bool(await self.session.scalar(stmt))

    async def save(self, member: Member) -> Member:
        # Members are only ever inserted through this repository
        await self.session.execute(members_table.insert().values(**member_to_dict(member)))
        await self.session.flush()
        return member
