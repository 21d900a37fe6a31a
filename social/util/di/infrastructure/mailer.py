"""Mail infrastructure providers."""

from dishka import Scope, provide

from social.adapter.sendgrid import SendGridMailClient
from social.config import Settings
from social.domain.service.mailer import MailClient
from social.util.di.base import ProviderBase


class MailerProvider(ProviderBase):
    """Mailer component base."""

    __mock_component__ = "mailer"


class ProdMailerProvider(MailerProvider):
    """Production mailer provider using SendGrid."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_client(self, settings: Settings) -> MailClient:
        """Provide SendGrid mail client."""
        return SendGridMailClient(
            api_key=settings.mail.sendgrid_api_key,
            from_email=settings.mail.from_email,
            from_name=settings.mail.from_name,
            max_retries=settings.mail.max_retries,
        )
