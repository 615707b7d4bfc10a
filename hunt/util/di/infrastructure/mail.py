"""Mail infrastructure providers."""

from dishka import Scope, provide

from hunt.adapter.mail import SmtpEmailSender
from hunt.domain.service import EmailSender
from hunt.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail transport component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider speaking SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self) -> EmailSender:
        """Provide SMTP transport.

        Connection parameters are not bound here; they are read from the
        delivery settings on every send.
        """
        return SmtpEmailSender()
