"""Mail infrastructure providers."""

from dishka import Scope, provide

from accounts.adapter.mail import SmtpMailer
from accounts.config import MailSettings
from accounts.domain.service import Mailer
from accounts.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mailer"


class ProdMailProvider(MailProvider):
    """Production mail provider delivering through SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mailer(self, mail_settings: MailSettings) -> Mailer:
        return SmtpMailer(mail_settings)
