"""Mail domain service.

Renders invitation messages from per-event templates and hands them to
the pluggable transport under a bounded timeout.
"""

import asyncio
from abc import ABC, abstractmethod
from email.utils import formataddr

import logfire

from hunt.domain.error import DeliveryError
from hunt.domain.model.event import Event
from hunt.domain.model.settings import EffectiveDeliverySettings
from hunt.domain.value import OutgoingEmail, SmtpConfig
from hunt.domain.value.common import ValueObject

from .base import Service
from .template import (
    DEFAULT_BODY_TEMPLATE,
    DEFAULT_SUBJECT_TEMPLATE,
    INVITE_LINK_PLACEHOLDER,
    ensure_placeholder,
    render_template,
)


class EmailSender(ABC):
    """Outbound mail transport.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def send(self, message: OutgoingEmail, config: SmtpConfig) -> None:
        """Deliver a message.

        Args:
            message: Rendered message
            config: Connection parameters in force for this attempt

        Raises:
            DeliveryError: If the message could not be delivered
        """
        pass


class RenderedInvitation(ValueObject):
    """Subject and body after template substitution."""

    subject: str
    body: str


class MailService(Service):
    """Domain service composing and delivering invitation emails."""

    def __init__(self, sender: EmailSender) -> None:
        """Initialize mail service.

        Args:
            sender: Mail transport
        """
        self.sender = sender

    def render_invitation(self, event: Event, join_link: str) -> RenderedInvitation:
        """Render the invitation message for an event.

        The event's own templates are used when set. The body always ends
        up containing the join link.

        Args:
            event: Event the invitation is for
            join_link: Public join link of the invitation

        Returns:
            Rendered subject and body
        """
        context = {
            "eventName": event.name,
            "eventDescription": event.description,
            "eventStart": event.starts_at.isoformat(),
            "eventEnd": event.ends_at.isoformat(),
            INVITE_LINK_PLACEHOLDER: join_link,
        }
        subject_template = event.invitation_email_subject or DEFAULT_SUBJECT_TEMPLATE
        body_template = ensure_placeholder(
            event.invitation_email_body or DEFAULT_BODY_TEMPLATE,
            INVITE_LINK_PLACEHOLDER,
            join_link,
        )
        return RenderedInvitation(
            subject=render_template(subject_template, context),
            body=render_template(body_template, context),
        )

    def sender_identity(
        self, event: Event, settings: EffectiveDeliverySettings
    ) -> str | None:
        """From header for an event's invitations.

        Per-event sender address and name win over the delivery settings.

        Returns:
            Formatted sender, or None if no address is known
        """
        address = event.sender_email or settings.smtp_from_address
        if not address:
            return None
        name = event.sender_name or settings.smtp_from_name
        return formataddr((name, address)) if name else address

    async def deliver(
        self,
        recipient: str,
        rendered: RenderedInvitation,
        sender: str,
        settings: EffectiveDeliverySettings,
    ) -> None:
        """Send a rendered invitation through the transport.

        Args:
            recipient: Recipient address
            rendered: Rendered subject and body
            sender: From header
            settings: Delivery settings in force; must have sending enabled

        Raises:
            DeliveryError: On transport failure or timeout
        """
        config = settings.smtp_config
        if config is None:
            raise DeliveryError("Email delivery is not configured")

        message = OutgoingEmail(
            sender=sender,
            recipient=recipient,
            subject=rendered.subject,
            body=rendered.body,
        )

        with logfire.span(
            "mail_service.deliver",
            smtp_host=config.host,
            timeout=settings.send_timeout_seconds,
        ):
            try:
                await asyncio.wait_for(
                    self.sender.send(message, config),
                    timeout=settings.send_timeout_seconds,
                )
            except asyncio.TimeoutError as e:
                logfire.error("Mail delivery timed out", smtp_host=config.host)
                raise DeliveryError("Mail server did not respond in time") from e
            except DeliveryError as e:
                logfire.error("Mail delivery failed", error=str(e))
                raise
            except Exception as e:
                logfire.error(
                    "Unexpected mail transport error",
                    error_type=type(e).__name__,
                )
                raise DeliveryError("Mail delivery failed") from e

            logfire.info("Mail delivered", smtp_host=config.host)
