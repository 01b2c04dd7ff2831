"""Unit tests for GroupService."""

from uuid import uuid4

import pytest

from accounts.domain.error import BusinessRuleViolationError, NotFoundError
from accounts.domain.model import Group, Member
from accounts.domain.repository import GroupRepository, MemberRepository
from accounts.domain.service import GroupService
from accounts.domain.value import Email, GroupId, MemberId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRemoveGroup:
    """Tests for remove_group method."""

    @pytest.mark.asyncio
    async def test_remove_empty_group(self, unit_env):
        group_service = await unit_env.get(GroupService)
        group_repo = await unit_env.get(GroupRepository)
        group = await group_repo.save(Group(id=GroupId(uuid4()), name="Staff"))

        await group_service.remove_group(group.id)

        assert await group_repo.find_by_id(group.id) is None

    @pytest.mark.asyncio
    async def test_remove_group_with_members_fails(self, unit_env):
        group_service = await unit_env.get(GroupService)
        group_repo = await unit_env.get(GroupRepository)
        member_repo = await unit_env.get(MemberRepository)
        group = await group_repo.save(Group(id=GroupId(uuid4()), name="Staff"))
        await member_repo.save(
            Member(
                id=MemberId(uuid4()),
                group_id=group.id,
                name="Carol",
                email=Email("carol@example.com"),
            )
        )

        with pytest.raises(BusinessRuleViolationError, match="Group is not empty."):
            await group_service.remove_group(group.id)

        assert await group_repo.find_by_id(group.id) is not None

    @pytest.mark.asyncio
    async def test_remove_missing_group_fails(self, unit_env):
        group_service = await unit_env.get(GroupService)

        with pytest.raises(NotFoundError):
            await group_service.remove_group(GroupId(uuid4()))
