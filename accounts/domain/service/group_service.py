"""Work members group domain service."""

import logfire

from accounts.domain.error import BusinessRuleViolationError
from accounts.domain.repository import GroupRepository, MemberRepository
from accounts.domain.value import GroupId

from .base import Service


class GroupService(Service):
    """Domain service for work members groups."""

    def __init__(
        self,
        group_repository: GroupRepository,
        member_repository: MemberRepository,
    ) -> None:
        self.group_repository = group_repository
        self.member_repository = member_repository

    async def remove_group(self, group_id: GroupId) -> None:
        """Remove an empty group.

        Raises:
            NotFoundError: If the group does not exist
            BusinessRuleViolationError: If members still belong to the group
        """
        with logfire.span("group_service.remove_group", group_id=str(group_id)):
            group = await self.group_repository.get(group_id)

            if await self.member_repository.has_by_group(group.id):
                logfire.warn("Group is not empty", group_id=str(group_id))
                raise BusinessRuleViolationError("Group is not empty.")

            await self.group_repository.remove(group)
            logfire.info("Group removed", group_id=str(group_id))
