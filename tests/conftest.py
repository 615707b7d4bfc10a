"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from hunt.domain.model import DeliverySettings, Event
from hunt.domain.value import EventId

os.environ.setdefault("ENVIRONMENT", "test")
if os.environ.get("HUNT_TEST_DATABASE_URL"):
    os.environ["DATABASE__URL"] = os.environ["HUNT_TEST_DATABASE_URL"]

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_event(
    name: str = "Spring Hunt",
    ends_in: timedelta = timedelta(days=7),
    **overrides,
) -> Event:
    """Build an event that started a day ago (earlier if it already ended).

    Args:
        name: Event name
        ends_in: Time from now until the event ends (negative: already ended)
        **overrides: Any other Event field

    Returns:
        Event domain model
    """
    now = datetime.now(timezone.utc)
    fields = {
        "id": EventId(uuid4()),
        "name": name,
        "description": "Find all the caches in the park",
        "starts_at": min(now - timedelta(days=1), now + ends_in - timedelta(hours=2)),
        "ends_at": now + ends_in,
    }
    fields.update(overrides)
    return Event(**fields)


def make_delivery_settings(**overrides) -> DeliverySettings:
    """Stored delivery settings with a complete SMTP configuration.

    Ceilings default to 2 per hour and 10 per day.
    """
    fields = {
        "smtp_host": "smtp.example.org",
        "smtp_port": 587,
        "smtp_user": "mailer",
        "smtp_password": "s3cret",
        "smtp_from_address": "hunt@example.org",
        "smtp_from_name": "Cache Hunt",
        "max_emails_per_hour_per_operator": 2,
        "max_emails_per_day_per_operator": 10,
    }
    fields.update(overrides)
    return DeliverySettings(**fields)
