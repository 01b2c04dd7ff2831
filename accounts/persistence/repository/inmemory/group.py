"""In-memory work members repositories for testing."""

from typing import Optional

from accounts.domain.model.group import Group, Member
from accounts.domain.repository.group import GroupRepository, MemberRepository
from accounts.domain.value import GroupId, MemberId


class InMemoryGroupRepository(GroupRepository):
    """In-memory implementation of GroupRepository for testing."""

    def __init__(self) -> None:
        self._groups: dict[GroupId, Group] = {}

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        return self._groups.get(group_id)

    async def save(self, group: Group) -> Group:
        self._groups[group.id] = group
        return group

    async def remove(self, group: Group) -> None:
        self._groups.pop(group.id, None)


class InMemoryMemberRepository(MemberRepository):
    """In-memory implementation of MemberRepository for testing."""

    def __init__(self) -> None:
        self._members: dict[MemberId, Member] = {}

    async def has_by_group(self, group_id: GroupId) -> bool:
        return any(m.group_id == group_id for m in self._members.values())

    async def save(self, member: Member) -> Member:
        self._members[member.id] = member
        return member
