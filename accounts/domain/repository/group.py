"""Work members group and member repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from accounts.domain.error import NotFoundError
from accounts.domain.model.group import Group, Member
from accounts.domain.value import GroupId


class GroupRepository(ABC):
    """Repository for Group entity."""

    @abstractmethod
    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        pass

    async def get(self, group_id: GroupId) -> Group:
        """Load a group that must exist.

        Raises:
            NotFoundError: If no group has this ID
        """
        group = await self.find_by_id(group_id)
        if group is None:
            raise NotFoundError("Group", str(group_id))
        return group

    @abstractmethod
    async def save(self, group: Group) -> Group:
        pass

    @abstractmethod
    async def remove(self, group: Group) -> None:
        pass


class MemberRepository(ABC):
    """Repository for Member entity."""

    @abstractmethod
    async def has_by_group(self, group_id: GroupId) -> bool:
        """Check whether any member belongs to the group."""
        pass

    @abstractmethod
    async def save(self, member: Member) -> Member:
        pass
