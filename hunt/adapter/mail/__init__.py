"""Mail transport adapters."""

from hunt.adapter.mail.sender import MockEmailSender, SmtpEmailSender

__all__ = ["MockEmailSender", "SmtpEmailSender"]
