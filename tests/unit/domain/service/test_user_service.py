"""Unit tests for UserService."""

import pytest

from accounts.domain.error import NotFoundError
from accounts.domain.repository import UserRepository
from accounts.domain.service import UserService
from accounts.domain.value import Email, new_user_id
from tests.conftest import make_active_user, make_network_user, make_waiting_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLookups:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_active_user())

        found = await user_service.get_by_id(user.id)

        assert found == user

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(new_user_id())

    @pytest.mark.asyncio
    async def test_get_by_email_is_case_insensitive(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_active_user(email="alice@example.com"))

        found = await user_service.get_by_email(Email("ALICE@example.com"))

        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_email_in_use(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.save(make_active_user(email="alice@example.com"))

        assert await user_service.email_in_use(Email("alice@example.com"))
        assert not await user_service.email_in_use(Email("other@example.com"))

    @pytest.mark.asyncio
    async def test_get_by_confirm_token(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_waiting_user(token="confirm-me"))

        assert (await user_service.get_by_confirm_token("confirm-me")).id == user.id
        with pytest.raises(NotFoundError):
            await user_service.get_by_confirm_token("unknown-token")

    @pytest.mark.asyncio
    async def test_find_by_network_identity(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.save(make_network_user("github", "42"))

        assert (await user_service.find_by_network_identity("github", "42")).id == user.id
        assert await user_service.find_by_network_identity("github", "43") is None


class TestSave:
    @pytest.mark.asyncio
    async def test_save_replaces_previous_state(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_service.save(make_active_user())

        await user_service.save(user.block())

        saved = await user_repo.get(user.id)
        assert saved.is_blocked
