"""SMTP mail client."""

from email.message import EmailMessage
from email.utils import formataddr

import aiosmtplib
import logfire

from accounts.adapter.error import MailDeliveryError
from accounts.config import MailSettings
from accounts.domain.service import Mailer, MailMessage


class SmtpMailer(Mailer):
    """Mailer delivering through an SMTP relay."""

    def __init__(self, settings: MailSettings) -> None:
        self.settings = settings

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = formataddr((self.settings.from_name, self.settings.from_address))
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content(message.body)
        return email

    async def send(self, message: MailMessage) -> None:
        """Send a message through the configured relay.

        Raises:
            MailDeliveryError: If the relay rejects or cannot be reached
        """
        with logfire.span(
            "smtp_mailer.send", to=message.to, host=self.settings.smtp_host
        ):
            try:
                await aiosmtplib.send(
                    self._build(message),
                    hostname=self.settings.smtp_host,
                    port=self.settings.smtp_port,
                    username=self.settings.smtp_username,
                    password=self.settings.smtp_password,
                    use_tls=self.settings.use_tls,
                    timeout=self.settings.timeout_seconds,
                )
            except aiosmtplib.SMTPException as e:
                logfire.error("Mail delivery failed", to=message.to, error=str(e))
                raise MailDeliveryError(message.to, str(e)) from e


class MockMailer(Mailer):
    """Mailer for testing.

    Keeps sent messages in memory instead of talking to a relay.
    """

    def __init__(self) -> None:
        self.sent: list[MailMessage] = []

    async def send(self, message: MailMessage) -> None:
        self.sent.append(message)

    def last_to(self, recipient: str) -> MailMessage | None:
        """Most recent message sent to ``recipient``."""
        for message in reversed(self.sent):
            if message.to == recipient:
                return message
        return None
