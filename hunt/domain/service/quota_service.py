"""Quota domain service (per-operator sliding window rate limits)."""

from datetime import datetime, timezone

import logfire

from hunt.domain.repository import AuditRecordRepository
from hunt.domain.value import OperatorId, QuotaWindow
from hunt.domain.value.common import ValueObject

from .base import Service
from .delivery_settings_service import DeliverySettingsService


class QuotaDecision(ValueObject):
    """Result of a quota check."""

    allowed: bool
    message: str | None = None
    window: QuotaWindow | None = None
    limit: int | None = None
    retry_after_seconds: int | None = None

    @classmethod
    def allow(cls) -> "QuotaDecision":
        return cls(allowed=True)


class QuotaService(Service):
    """Domain service deciding whether an operator may send another email.

    Quotas are derived from the audit trail: the count of an operator's
    records inside a window, excluding RATE_LIMITED ones. The hourly
    window is checked first and a denial there skips the daily query.
    """

    def __init__(
        self,
        audit_repository: AuditRecordRepository,
        delivery_settings_service: DeliverySettingsService,
    ) -> None:
        """Initialize quota service.

        Args:
            audit_repository: Audit record repository
            delivery_settings_service: Source of the current ceilings
        """
        self.audit_repository = audit_repository
        self.delivery_settings_service = delivery_settings_service

    async def check(
        self, operator_id: OperatorId | None, now: datetime | None = None
    ) -> QuotaDecision:
        """Check whether the operator is within both ceilings.

        Args:
            operator_id: Operator about to send; None skips metering
            now: Reference time, defaults to the current time

        Returns:
            Allowed decision, or a denial naming the exceeded ceiling
        """
        if operator_id is None:
            return QuotaDecision.allow()

        now = now or datetime.now(timezone.utc)

        with logfire.span("quota_service.check", operator_id=str(operator_id)):
            settings = await self.delivery_settings_service.current()

            for window, ceiling in (
                (QuotaWindow.HOUR, settings.max_per_hour),
                (QuotaWindow.DAY, settings.max_per_day),
            ):
                # 0 / None: no ceiling for this window
                if not ceiling or ceiling <= 0:
                    continue

                since = now - window.duration
                count = await self.audit_repository.count_quota_consuming_since(
                    operator_id, since
                )
                if count >= ceiling:
                    retry_after = await self._retry_after(
                        operator_id, window, ceiling, now
                    )
                    logfire.warn(
                        "Quota exceeded",
                        operator_id=str(operator_id),
                        window=window.value,
                        count=count,
                        ceiling=ceiling,
                    )
                    return QuotaDecision(
                        allowed=False,
                        message=f"Limit reached ({ceiling} per {window.value}).",
                        window=window,
                        limit=ceiling,
                        retry_after_seconds=retry_after,
                    )

            logfire.info("Quota available", operator_id=str(operator_id))
            return QuotaDecision.allow()

    async def _retry_after(
        self,
        operator_id: OperatorId,
        window: QuotaWindow,
        ceiling: int,
        now: datetime,
    ) -> int | None:
        """Seconds until enough records leave the window to fall below the ceiling."""
        timestamps = await self.audit_repository.quota_consuming_timestamps_since(
            operator_id, now - window.duration
        )
        if not timestamps:
            return None
        index = min(max(len(timestamps) - ceiling, 0), len(timestamps) - 1)
        frees_at = timestamps[index] + window.duration
        return max(int((frees_at - now).total_seconds()) + 1, 0)
