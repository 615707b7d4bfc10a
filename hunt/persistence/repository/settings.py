"""PostgreSQL implementation of DeliverySettings repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.model import DeliverySettings
from hunt.domain.repository import DeliverySettingsRepository
from hunt.persistence.mappers import delivery_settings_to_dict, row_to_delivery_settings
from hunt.persistence.tables import system_settings_table

SETTINGS_ROW_ID = 1


class PostgresDeliverySettingsRepository(DeliverySettingsRepository):
    """Reads and writes the single system settings row."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get(self) -> Optional[DeliverySettings]:
        """Load the stored overrides, if the row exists."""
        stmt = select(system_settings_table).where(
            system_settings_table.c.id == SETTINGS_ROW_ID
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_delivery_settings(dict(row)) if row else None

    async def save(self, settings: DeliverySettings) -> DeliverySettings:
        """Create or replace the settings row."""
        values = delivery_settings_to_dict(settings)

        if await self.get() is not None:
            stmt = (
                update(system_settings_table)
                .where(system_settings_table.c.id == SETTINGS_ROW_ID)
                .values(**values)
            )
        else:
            stmt = insert(system_settings_table).values(id=SETTINGS_ROW_ID, **values)

        await self.session.execute(stmt)
        await self.session.flush()
        return settings
