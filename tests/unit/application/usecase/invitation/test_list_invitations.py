"""Tests for list invitations use case."""

from uuid import uuid4

import pytest

from hunt.application.usecase.invitation import (
    ListInvitationsRequest,
    ListInvitationsUseCase,
)
from hunt.domain.error import NotFoundError
from hunt.domain.repository import EventRepository
from hunt.domain.service import InvitationService
from hunt.domain.value import DeliveryMethod
from tests.conftest import make_event
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListInvitationsUseCase:
    """Tests for ListInvitationsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_invitations_with_links(self, unit_env):
        event = await (await unit_env.get(EventRepository)).save(make_event())
        invitation_service = await unit_env.get(InvitationService)
        invitation = await invitation_service.issue(
            event.id, DeliveryMethod.EMAIL, "player@example.org"
        )
        use_case = await unit_env.get(ListInvitationsUseCase)

        response = await use_case.execute(ListInvitationsRequest(event_id=event.id))

        assert len(response.invitations) == 1
        item = response.invitations[0]
        assert item.invitation_id == invitation.id
        assert item.recipient == "player@example.org"
        assert item.join_link == f"http://localhost:5173/join/{invitation.token.root}"

    @pytest.mark.asyncio
    async def test_unknown_event(self, unit_env):
        use_case = await unit_env.get(ListInvitationsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListInvitationsRequest(event_id=uuid4()))
