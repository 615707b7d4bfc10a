"""Delivery settings repository interface."""

from abc import ABC, abstractmethod

from hunt.domain.model.settings import DeliverySettings


class DeliverySettingsRepository(ABC):
    """Repository for the single system settings row."""

    @abstractmethod
    async def get(self) -> DeliverySettings | None:
        """Load the stored overrides.

        Returns:
            The settings row, or None if none was ever saved
        """
        pass

    @abstractmethod
    async def save(self, settings: DeliverySettings) -> DeliverySettings:
        """Store the overrides.

        Args:
            settings: New overrides

        Returns:
            The saved settings
        """
        pass
