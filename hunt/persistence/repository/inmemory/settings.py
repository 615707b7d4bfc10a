"""In-memory delivery settings repository for testing."""

from typing import Optional

from hunt.domain.model.settings import DeliverySettings
from hunt.domain.repository.settings import DeliverySettingsRepository

from .database import InMemoryDatabase


class InMemoryDeliverySettingsRepository(DeliverySettingsRepository):
    """In-memory implementation of DeliverySettingsRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def get(self) -> Optional[DeliverySettings]:
        """Load the stored overrides."""
        return self._db.delivery_settings

    async def save(self, settings: DeliverySettings) -> DeliverySettings:
        """Replace the stored overrides."""
        self._db.delivery_settings = settings
        return settings
