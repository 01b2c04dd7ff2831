"""Unit tests for NotificationService."""

import pytest

from accounts.domain.service import Mailer, NotificationService
from accounts.domain.value import Email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotifications:
    @pytest.mark.asyncio
    async def test_confirm_token_link(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        mailer = await unit_env.get(Mailer)

        await notification_service.send_confirm_token(Email("a@example.com"), "tok")

        message = mailer.last_to("a@example.com")
        assert message.subject == "Sign up confirmation"
        assert "http://localhost:3000/signup/tok" in message.body

    @pytest.mark.asyncio
    async def test_reset_token_link(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        mailer = await unit_env.get(Mailer)

        await notification_service.send_reset_token(Email("a@example.com"), "tok")

        assert "/reset/tok" in mailer.last_to("a@example.com").body

    @pytest.mark.asyncio
    async def test_new_email_token_link(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        mailer = await unit_env.get(Mailer)

        await notification_service.send_new_email_token(Email("b@example.com"), "tok")

        assert "/profile/email/tok" in mailer.last_to("b@example.com").body
        assert mailer.last_to("a@example.com") is None
