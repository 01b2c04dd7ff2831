"""Unit tests for LoginUseCase and GetCurrentUserUseCase."""

import pytest

from accounts.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from accounts.domain.error import AuthenticationError
from accounts.domain.repository import UserRepository
from accounts.domain.service import JWTService, PasswordHasher
from accounts.domain.value import Role
from tests.conftest import make_active_user, make_network_user, make_waiting_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def save_with_password(unit_env, user, password="secret-password"):
    hasher = await unit_env.get(PasswordHasher)
    user_repo = await unit_env.get(UserRepository)
    return await user_repo.save(
        user.model_copy(update={"password_hash": hasher.hash(password)})
    )


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token(self, unit_env):
        # Arrange
        use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        user = await save_with_password(unit_env, make_active_user(role=Role.ADMIN))

        # Act
        response = await use_case.execute(
            LoginRequest(email="ALICE@example.com", password="secret-password")
        )

        # Assert
        assert response.user_id == str(user.id)
        assert response.name == "Alice Smith"
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == str(user.id)
        assert payload.role == "ROLE_ADMIN"

    @pytest.mark.asyncio
    async def test_wrong_password_fails(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)
        await save_with_password(unit_env, make_active_user())

        with pytest.raises(AuthenticationError, match="Incorrect email or password."):
            await use_case.execute(
                LoginRequest(email="alice@example.com", password="wrong-password")
            )

    @pytest.mark.asyncio
    async def test_unknown_email_fails(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError, match="Incorrect email or password."):
            await use_case.execute(
                LoginRequest(email="nobody@example.com", password="secret-password")
            )

    @pytest.mark.asyncio
    async def test_unconfirmed_user_fails(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)
        await save_with_password(unit_env, make_waiting_user(email="bob@example.com"))

        with pytest.raises(AuthenticationError, match="User is not confirmed."):
            await use_case.execute(
                LoginRequest(email="bob@example.com", password="secret-password")
            )

    @pytest.mark.asyncio
    async def test_blocked_user_fails(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)
        await save_with_password(unit_env, make_active_user().block())

        with pytest.raises(AuthenticationError, match="User is blocked."):
            await use_case.execute(
                LoginRequest(email="alice@example.com", password="secret-password")
            )


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_active_user(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_network_user())
        token = jwt_service.create_token(str(user.id), user.role.value)

        details = await use_case.execute(token)

        assert details.id == user.id

    @pytest.mark.asyncio
    async def test_missing_token_fails(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute(None)

    @pytest.mark.asyncio
    async def test_garbage_token_fails(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute("not-a-jwt")

    @pytest.mark.asyncio
    async def test_blocked_after_login_fails(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_active_user())
        token = jwt_service.create_token(str(user.id), user.role.value)
        await user_repo.save(user.block())

        with pytest.raises(AuthenticationError):
            await use_case.execute(token)
