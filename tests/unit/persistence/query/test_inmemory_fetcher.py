"""Unit tests for the in-memory user read model."""

from datetime import timedelta

import pytest

from accounts.application.query import UserFetcher, UserFilter
from accounts.domain.repository import UserRepository
from accounts.domain.value import Name, ResetPasswordToken, Role, UserStatus
from tests.conftest import NOW, make_active_user, make_network_user, make_waiting_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed(unit_env):
    """Three users registered a day apart: carol, alice, bob."""
    user_repo = await unit_env.get(UserRepository)
    carol = make_active_user(email="carol@example.com", first="Carol", last="King")
    alice = make_active_user(email="alice@example.com", first="Alice", last="Smith")
    bob = make_waiting_user(email="bob@sample.org")
    for days, user in enumerate([carol, alice, bob]):
        await user_repo.save(
            user.model_copy(update={"register_date": NOW + timedelta(days=days)})
        )
    return carol, alice, bob


class TestAll:
    """Tests for filtering, sorting and paging."""

    @pytest.mark.asyncio
    async def test_default_order_is_newest_first(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        carol, alice, bob = await seed(unit_env)

        page = await fetcher.all(UserFilter(), 1, 10, "register_date", "desc")

        assert [u.id for u in page.items] == [bob.id, alice.id, carol.id]
        assert page.total == 3
        assert page.pages == 1

    @pytest.mark.asyncio
    async def test_sort_by_name_ascending(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        await seed(unit_env)

        page = await fetcher.all(UserFilter(), 1, 10, "name", "asc")

        assert [u.name for u in page.items] == ["Alice Smith", "Bob Jones", "Carol King"]

    @pytest.mark.asyncio
    async def test_any_direction_other_than_desc_is_ascending(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        await seed(unit_env)

        page = await fetcher.all(UserFilter(), 1, 10, "email", "sideways")

        assert page.items[0].email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_filters_are_case_insensitive_substrings(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        await seed(unit_env)

        by_email = await fetcher.all(
            UserFilter(email="EXAMPLE"), 1, 10, "email", "asc"
        )
        by_name = await fetcher.all(UserFilter(name="smi"), 1, 10, "email", "asc")

        assert [u.email for u in by_email.items] == [
            "alice@example.com",
            "carol@example.com",
        ]
        assert [u.name for u in by_name.items] == ["Alice Smith"]

    @pytest.mark.asyncio
    async def test_status_and_role_filters_are_exact(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        await seed(unit_env)

        waiting = await fetcher.all(
            UserFilter(status=UserStatus.WAIT), 1, 10, "email", "asc"
        )
        admins = await fetcher.all(UserFilter(role=Role.ADMIN), 1, 10, "email", "asc")

        assert [u.email for u in waiting.items] == ["bob@sample.org"]
        assert admins.total == 0

    @pytest.mark.asyncio
    async def test_paging(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        await seed(unit_env)

        page = await fetcher.all(UserFilter(), 2, 2, "email", "asc")

        assert [u.email for u in page.items] == ["carol@example.com"]
        assert page.total == 3
        assert page.pages == 2

    @pytest.mark.asyncio
    async def test_users_without_email_sort_last_ascending(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        user_repo = await unit_env.get(UserRepository)
        await seed(unit_env)
        await user_repo.save(make_network_user())

        page = await fetcher.all(UserFilter(), 1, 10, "email", "asc")

        assert page.items[-1].email is None

    @pytest.mark.asyncio
    async def test_unknown_sort_field_rejected(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)

        with pytest.raises(ValueError, match="Cannot sort by id"):
            await fetcher.all(UserFilter(), 1, 10, "id", "asc")


class TestLookups:
    """Tests for single-user views."""

    @pytest.mark.asyncio
    async def test_find_for_auth_trims_name(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_active_user())

        view = await fetcher.find_for_auth("alice@example.com")

        assert view.id == user.id
        assert view.name == "Alice Smith"
        assert view.password_hash == "hash"

    @pytest.mark.asyncio
    async def test_find_for_auth_by_network(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_network_user("github", "7"))

        assert (await fetcher.find_for_auth_by_network("github", "7")).id == user.id
        assert await fetcher.find_for_auth_by_network("github", "8") is None

    @pytest.mark.asyncio
    async def test_find_by_confirm_token(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_waiting_user(token="ct"))

        view = await fetcher.find_by_confirm_token("ct")

        assert view.id == user.id
        assert view.status is UserStatus.WAIT

    @pytest.mark.asyncio
    async def test_exists_by_reset_token(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        user_repo = await unit_env.get(UserRepository)
        token = ResetPasswordToken(token="rt", expires_at=NOW + timedelta(hours=1))
        await user_repo.save(make_active_user().request_password_reset(token, NOW))

        assert await fetcher.exists_by_reset_token("rt")
        assert not await fetcher.exists_by_reset_token("other")

    @pytest.mark.asyncio
    async def test_find_details_after_rename(self, unit_env):
        fetcher = await unit_env.get(UserFetcher)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_active_user())
        await user_repo.save(user.change_name(Name(first="Al", last="S")))

        details = await fetcher.find_details(user.id)

        assert (details.first_name, details.last_name) == ("Al", "S")
