"""Delivery settings domain service."""

import logfire

from hunt.config import MailSettings, RateLimitSettings
from hunt.domain.model.settings import DeliverySettings, EffectiveDeliverySettings
from hunt.domain.repository import DeliverySettingsRepository

from .base import Service


class DeliverySettingsService(Service):
    """Resolves the delivery settings in force right now.

    The stored settings row overrides the deployment configuration field
    by field. Nothing is cached, so changes apply to the next dispatch.
    """

    def __init__(
        self,
        settings_repository: DeliverySettingsRepository,
        mail_settings: MailSettings,
        rate_limit_settings: RateLimitSettings,
    ) -> None:
        """Initialize delivery settings service.

        Args:
            settings_repository: Stored overrides
            mail_settings: Deployment mail defaults
            rate_limit_settings: Deployment rate limit defaults
        """
        self.settings_repository = settings_repository
        self.mail_settings = mail_settings
        self.rate_limit_settings = rate_limit_settings

    async def current(self) -> EffectiveDeliverySettings:
        """Load the effective delivery settings.

        Returns:
            Stored overrides merged over the deployment defaults
        """
        stored = await self.settings_repository.get() or DeliverySettings()
        mail = self.mail_settings
        limits = self.rate_limit_settings

        effective = EffectiveDeliverySettings(
            smtp_host=_first(stored.smtp_host, mail.smtp_host),
            smtp_port=_first(stored.smtp_port, mail.smtp_port),
            smtp_user=_first(stored.smtp_user, mail.smtp_user),
            smtp_password=_first(stored.smtp_password, mail.smtp_password),
            smtp_use_tls=_first(stored.smtp_use_tls, mail.smtp_use_tls),
            smtp_from_address=_first(stored.smtp_from_address, mail.from_address),
            smtp_from_name=_first(stored.smtp_from_name, mail.from_name),
            max_per_hour=_first(
                stored.max_emails_per_hour_per_operator,
                limits.max_emails_per_hour_per_operator,
            ),
            max_per_day=_first(
                stored.max_emails_per_day_per_operator,
                limits.max_emails_per_day_per_operator,
            ),
            send_timeout_seconds=mail.send_timeout_seconds,
        )
        logfire.debug(
            "Delivery settings resolved",
            email_sending_enabled=effective.email_sending_enabled,
            max_per_hour=effective.max_per_hour,
            max_per_day=effective.max_per_day,
        )
        return effective


def _first(*values):
    """First value that is not None."""
    return next((v for v in values if v is not None), None)
