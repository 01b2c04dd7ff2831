"""Remove work members group use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from accounts.application.usecase.base import BaseUseCase
from accounts.domain.repository import Flusher
from accounts.domain.service import GroupService
from accounts.domain.value import GroupId


class RemoveGroupRequest(BaseModel):
    group_id: UUID


class RemoveGroupUseCase(BaseUseCase):
    """Deletes a group that has no members."""

    def __init__(self, group_service: GroupService, flusher: Flusher) -> None:
        self.group_service = group_service
        self.flusher = flusher

    async def execute(self, request: RemoveGroupRequest) -> None:
        """Remove the group.

        Raises:
            NotFoundError: If the group does not exist
            BusinessRuleViolationError: If the group still has members
        """
        with logfire.span("remove_group", group_id=str(request.group_id)):
            await self.group_service.remove_group(GroupId(request.group_id))
            await self.flusher.flush()
