"""SMTP mail transport.

The blocking smtplib session runs in a worker thread so the event loop
stays responsive. MailService stops waiting once the send timeout has
passed, but a thread cannot be cancelled, so the session carries the
same deadline itself: every socket operation is bounded by what is left
of it, and the message is not handed to the server once it has passed.
A server that accepts the message in the last moments before the
deadline can still deliver mail that the caller records as failed.
"""

import asyncio
import smtplib
import socket
import time
from email.message import EmailMessage

import logfire

from hunt.domain.error import DeliveryError
from hunt.domain.service.mail_service import EmailSender
from hunt.domain.value import OutgoingEmail, SmtpConfig


class SmtpEmailSender(EmailSender):
    """Mail transport speaking SMTP.

    ``use_tls`` selects implicit TLS (SMTPS). Otherwise the connection is
    upgraded with STARTTLS when the server offers it.
    """

    def __init__(self, socket_timeout: float = 10.0) -> None:
        """Initialize SMTP sender.

        Args:
            socket_timeout: Upper bound for each blocking socket operation
        """
        self.socket_timeout = socket_timeout

    async def send(self, message: OutgoingEmail, config: SmtpConfig) -> None:
        """Deliver a message over SMTP.

        Raises:
            DeliveryError: With a short description safe for the audit trail
        """
        deadline = time.monotonic() + config.timeout_seconds
        await asyncio.to_thread(self._send_blocking, message, config, deadline)

    def _budget(self, deadline: float) -> float:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise socket.timeout("send deadline passed")
        return min(self.socket_timeout, remaining)

    def _arm(self, server: smtplib.SMTP, deadline: float) -> None:
        if server.sock is not None:
            server.sock.settimeout(self._budget(deadline))

    def _send_blocking(
        self, message: OutgoingEmail, config: SmtpConfig, deadline: float
    ) -> None:
        email = EmailMessage()
        email["From"] = message.sender
        email["To"] = message.recipient
        email["Subject"] = message.subject
        email.set_content(message.body)

        try:
            timeout = self._budget(deadline)
            if config.use_tls:
                server = smtplib.SMTP_SSL(config.host, config.port, timeout=timeout)
            else:
                server = smtplib.SMTP(config.host, config.port, timeout=timeout)
            with server:
                if not config.use_tls:
                    self._arm(server, deadline)
                    server.ehlo()
                    if server.has_extn("starttls"):
                        server.starttls()
                        self._arm(server, deadline)
                        server.ehlo()
                self._arm(server, deadline)
                server.login(config.username, config.password)
                self._arm(server, deadline)
                server.send_message(email, to_addrs=[message.recipient])
        except smtplib.SMTPAuthenticationError as e:
            raise DeliveryError("Mail server rejected the credentials") from e
        except smtplib.SMTPRecipientsRefused as e:
            raise DeliveryError("Mail server refused the recipient") from e
        except smtplib.SMTPSenderRefused as e:
            raise DeliveryError("Mail server refused the sender address") from e
        except smtplib.SMTPException as e:
            raise DeliveryError(f"Mail server error ({type(e).__name__})") from e
        except socket.timeout as e:
            raise DeliveryError("Mail server did not respond in time") from e
        except OSError as e:
            raise DeliveryError("Mail server unreachable") from e

        logfire.debug("SMTP session completed", smtp_host=config.host)


class MockEmailSender(EmailSender):
    """In-memory transport for tests.

    Records every message. Set ``fail_with`` to make sends fail, or
    ``delay`` to make them slow.
    """

    def __init__(self) -> None:
        self.sent: list[OutgoingEmail] = []
        self.configs: list[SmtpConfig] = []
        self.fail_with: Exception | None = None
        self.delay: float = 0.0

    async def send(self, message: OutgoingEmail, config: SmtpConfig) -> None:
        """Record the message, or fail as configured."""
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(message)
        self.configs.append(config)
