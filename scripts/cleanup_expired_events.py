#!/usr/bin/env python3
"""Delete events that ended longer ago than the retention period.

Each event goes together with its invitations and audit records. Run it
from a scheduler, e.g. once a night.
"""

import argparse
import asyncio
import sys
from datetime import datetime, timedelta, timezone

import logfire

from hunt.config import Settings
from hunt.domain.service import EventService
from hunt.util.di.container import create_container
from hunt.util.logging import setup_logging
from hunt.util.observability import configure_logfire


async def cleanup(retention_days: int, dry_run: bool) -> int:
    """Delete expired events.

    Args:
        retention_days: Days an ended event is kept
        dry_run: Only report what would be deleted

    Returns:
        Number of events deleted (or that would be deleted)
    """
    cutoff = datetime.now(timezone.utc) - timedelta(days=retention_days)
    container = create_container()

    try:
        with logfire.span(
            "cleanup_expired_events", cutoff=cutoff.isoformat(), dry_run=dry_run
        ):
            async with container() as request_container:
                event_service = await request_container.get(EventService)
                events = await event_service.find_ended_before(cutoff)

                for event in events:
                    logfire.info(
                        "Expired event",
                        event_id=str(event.id),
                        ended_at=event.ends_at.isoformat(),
                    )
                    if not dry_run:
                        await event_service.delete_event(event.id)

            logfire.info("Expired events cleaned up", count=len(events))
            return len(events)
    finally:
        await container.close()


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--retention-days",
        type=int,
        default=settings.retention.data_retention_days,
        help="Days to keep ended events (default: %(default)s)",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="List events without deleting them"
    )
    args = parser.parse_args()

    count = asyncio.run(cleanup(args.retention_days, args.dry_run))
    print(f"{'Would delete' if args.dry_run else 'Deleted'} {count} event(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
