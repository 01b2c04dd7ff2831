"""Mock mail providers for testing."""

from dishka import Scope, provide

from accounts.adapter.mail import MockMailer
from accounts.domain.service import Mailer
from accounts.util.di.infrastructure.mail import MailProvider


class MockMailProvider(MailProvider):
    """Mock mail provider collecting messages in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mailer(self) -> Mailer:
        """Provide mock mailer."""
        return MockMailer()
