"""Test harness for unit and integration tests.

Integration tests expect a migrated PostgreSQL database reachable at
DATABASE__URL (tests/conftest.py copies HUNT_TEST_DATABASE_URL there).
"""

import pytest_asyncio

from hunt.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_issue(unit_env):
            service = await unit_env.get(InvitationService)
            invitation = await service.issue(event_id, DeliveryMethod.LINK)
            assert invitation.is_active
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
