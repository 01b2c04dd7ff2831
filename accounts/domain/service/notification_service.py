"""Email notification domain service."""

from abc import ABC, abstractmethod

import logfire
from pydantic import BaseModel

from accounts.config import Settings
from accounts.domain.value import Email

from .base import Service


class MailMessage(BaseModel):
    """Plain-text email to a single recipient."""

    to: str
    subject: str
    body: str


class Mailer(ABC):
    """Outgoing mail interface, implemented by the mail adapter."""

    @abstractmethod
    async def send(self, message: MailMessage) -> None:
        """Deliver a message.

        Raises:
            MailDeliveryError: If the message could not be delivered
        """
        pass


class NotificationService(Service):
    """Composes and sends the token emails of the account flows."""

    def __init__(self, mailer: Mailer, settings: Settings) -> None:
        self.mailer = mailer
        self.settings = settings

    async def send_confirm_token(self, email: Email, token: str) -> None:
        url = f"{self.settings.api.frontend_url}/signup/{token}"
        await self._send(
            email,
            "Sign up confirmation",
            f"Follow the link to confirm your registration:\n\n{url}\n",
        )

    async def send_reset_token(self, email: Email, token: str) -> None:
        url = f"{self.settings.api.frontend_url}/reset/{token}"
        await self._send(
            email,
            "Password resetting",
            f"Follow the link to set a new password:\n\n{url}\n",
        )

    async def send_new_email_token(self, email: Email, token: str) -> None:
        url = f"{self.settings.api.frontend_url}/profile/email/{token}"
        await self._send(
            email,
            "Email confirmation",
            f"Follow the link to confirm your new email:\n\n{url}\n",
        )

    async def _send(self, email: Email, subject: str, body: str) -> None:
        with logfire.span("notification_service.send", to=email.root, subject=subject):
            await self.mailer.send(MailMessage(to=email.root, subject=subject, body=body))
            logfire.info("Notification sent", to=email.root, subject=subject)
