"""Unit tests for sign up by email."""

import pytest

from accounts.application.usecase.signup import (
    SignUpConfirmRequest,
    SignUpConfirmUseCase,
    SignUpRequest,
    SignUpRequestUseCase,
)
from accounts.domain.error import (
    BusinessRuleViolationError,
    InvalidOperationError,
    NotFoundError,
)
from accounts.domain.repository import Flusher, UserRepository
from accounts.domain.service import Mailer, PasswordHasher
from accounts.domain.value import Email, UserStatus
from tests.conftest import make_active_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def sign_up_request(email: str = "new@example.com") -> SignUpRequest:
    return SignUpRequest(
        email=email, password="secret-password", first_name="New", last_name="User"
    )


class TestSignUpRequestUseCase:
    """Tests for SignUpRequestUseCase."""

    @pytest.mark.asyncio
    async def test_sign_up_creates_waiting_user_and_sends_token(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SignUpRequestUseCase)
        user_repo = await unit_env.get(UserRepository)
        mailer = await unit_env.get(Mailer)
        flusher = await unit_env.get(Flusher)
        hasher = await unit_env.get(PasswordHasher)

        # Act
        response = await use_case.execute(sign_up_request("New@Example.com"))

        # Assert
        assert response.status is UserStatus.WAIT
        assert response.email == "new@example.com"

        user = await user_repo.find_by_email(Email("new@example.com"))
        assert user.confirm_token
        assert hasher.verify("secret-password", user.password_hash)

        message = mailer.last_to("new@example.com")
        assert f"/signup/{user.confirm_token}" in message.body
        assert flusher.flush_count == 1

    @pytest.mark.asyncio
    async def test_sign_up_with_taken_email_fails(self, unit_env):
        use_case = await unit_env.get(SignUpRequestUseCase)
        user_repo = await unit_env.get(UserRepository)
        flusher = await unit_env.get(Flusher)
        await user_repo.save(make_active_user(email="taken@example.com"))

        with pytest.raises(BusinessRuleViolationError, match="User already exists."):
            await use_case.execute(sign_up_request("taken@example.com"))

        assert flusher.flush_count == 0


class TestSignUpConfirmUseCase:
    """Tests for SignUpConfirmUseCase."""

    @pytest.mark.asyncio
    async def test_confirm_activates_user(self, unit_env):
        sign_up = await unit_env.get(SignUpRequestUseCase)
        confirm = await unit_env.get(SignUpConfirmUseCase)
        user_repo = await unit_env.get(UserRepository)
        await sign_up.execute(sign_up_request())
        token = (await user_repo.find_by_email(Email("new@example.com"))).confirm_token

        response = await confirm.execute(SignUpConfirmRequest(token=token))

        assert response.status is UserStatus.ACTIVE
        user = await user_repo.find_by_email(Email("new@example.com"))
        assert user.confirm_token is None

    @pytest.mark.asyncio
    async def test_confirm_token_is_single_use(self, unit_env):
        sign_up = await unit_env.get(SignUpRequestUseCase)
        confirm = await unit_env.get(SignUpConfirmUseCase)
        user_repo = await unit_env.get(UserRepository)
        await sign_up.execute(sign_up_request())
        token = (await user_repo.find_by_email(Email("new@example.com"))).confirm_token
        await confirm.execute(SignUpConfirmRequest(token=token))

        with pytest.raises(NotFoundError):
            await confirm.execute(SignUpConfirmRequest(token=token))

    @pytest.mark.asyncio
    async def test_confirm_activated_user_with_kept_token_fails(self, unit_env):
        confirm = await unit_env.get(SignUpConfirmUseCase)
        user_repo = await unit_env.get(UserRepository)
        # An admin activation keeps the confirm token in place
        sign_up = await unit_env.get(SignUpRequestUseCase)
        await sign_up.execute(sign_up_request())
        user = await user_repo.find_by_email(Email("new@example.com"))
        await user_repo.save(user.activate())

        with pytest.raises(InvalidOperationError, match="User is already confirmed."):
            await confirm.execute(SignUpConfirmRequest(token=user.confirm_token))
