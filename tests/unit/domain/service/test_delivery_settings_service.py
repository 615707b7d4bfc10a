"""Unit tests for DeliverySettingsService."""

import pytest

from hunt.config import MailSettings, RateLimitSettings
from hunt.domain.model import DeliverySettings
from hunt.domain.service import DeliverySettingsService
from hunt.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryDeliverySettingsRepository,
)


def make_service(
    stored: DeliverySettings | None = None,
    mail: MailSettings | None = None,
) -> DeliverySettingsService:
    repository = InMemoryDeliverySettingsRepository(
        InMemoryDatabase(delivery_settings=stored)
    )
    return DeliverySettingsService(
        settings_repository=repository,
        mail_settings=mail or MailSettings(),
        rate_limit_settings=RateLimitSettings(),
    )


class TestCurrent:
    """Tests for DeliverySettingsService.current."""

    @pytest.mark.asyncio
    async def test_defaults_without_stored_row(self):
        settings = await make_service().current()

        assert settings.max_per_hour == 50
        assert settings.max_per_day == 200
        assert settings.email_sending_enabled is False
        assert settings.smtp_config is None

    @pytest.mark.asyncio
    async def test_stored_row_overrides_field_by_field(self):
        mail = MailSettings(
            smtp_host="env.example.org",
            smtp_port=25,
            smtp_user="env-user",
            smtp_password="env-pass",
            from_address="env@example.org",
        )
        stored = DeliverySettings(
            smtp_host="db.example.org", max_emails_per_hour_per_operator=5
        )

        settings = await make_service(stored, mail).current()

        assert settings.smtp_host == "db.example.org"
        assert settings.smtp_port == 25
        assert settings.smtp_user == "env-user"
        assert settings.max_per_hour == 5
        assert settings.max_per_day == 200
        assert settings.email_sending_enabled is True
        assert settings.smtp_config.host == "db.example.org"

    @pytest.mark.asyncio
    async def test_stored_zero_ceiling_is_kept(self):
        stored = DeliverySettings(max_emails_per_day_per_operator=0)

        settings = await make_service(stored).current()

        assert settings.max_per_day == 0

    @pytest.mark.asyncio
    async def test_missing_password_disables_sending(self):
        stored = DeliverySettings(
            smtp_host="smtp.example.org",
            smtp_port=587,
            smtp_user="mailer",
            smtp_from_address="hunt@example.org",
        )

        settings = await make_service(stored).current()

        assert settings.email_sending_enabled is False

    @pytest.mark.asyncio
    async def test_update_is_visible_immediately(self):
        service = make_service()

        await service.update(DeliverySettings(max_emails_per_hour_per_operator=7))

        assert (await service.current()).max_per_hour == 7
