"""Delivery settings.

The system settings row lets administrators override the deployment
configuration without a restart. Every field is optional; unset fields
fall back to the environment.
"""

from typing import Optional

from hunt.domain.model.common import DomainModel
from hunt.domain.value import SmtpConfig


class DeliverySettings(DomainModel):
    """Centrally stored overrides for mail delivery and rate limits."""

    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_tls: Optional[bool] = None
    smtp_from_address: Optional[str] = None
    smtp_from_name: Optional[str] = None
    max_emails_per_hour_per_operator: Optional[int] = None
    max_emails_per_day_per_operator: Optional[int] = None


class EffectiveDeliverySettings(DomainModel):
    """Delivery settings after merging the stored row over the environment."""

    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_tls: bool = False
    smtp_from_address: Optional[str] = None
    smtp_from_name: Optional[str] = None
    max_per_hour: Optional[int] = None
    max_per_day: Optional[int] = None
    send_timeout_seconds: float = 15.0

    @property
    def email_sending_enabled(self) -> bool:
        """Whether the transport has everything it needs to send."""
        return bool(
            self.smtp_host
            and self.smtp_port
            and self.smtp_from_address
            and self.smtp_user
            and self.smtp_password
        )

    @property
    def smtp_config(self) -> Optional[SmtpConfig]:
        """Transport parameters, or None when sending is not configured."""
        if not self.email_sending_enabled:
            return None
        return SmtpConfig(
            host=self.smtp_host,
            port=self.smtp_port,
            username=self.smtp_user,
            password=self.smtp_password,
            use_tls=self.smtp_use_tls,
            timeout_seconds=self.send_timeout_seconds,
        )
