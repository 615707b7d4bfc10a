"""Tests for delete event use case."""

from uuid import uuid4

import pytest

from hunt.application.usecase.event import DeleteEventRequest, DeleteEventUseCase
from hunt.domain.error import NotFoundError
from hunt.domain.repository import EventRepository, InvitationRepository
from hunt.domain.service import InvitationService
from hunt.domain.value import DeliveryMethod
from tests.conftest import make_event
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteEventUseCase:
    """Tests for DeleteEventUseCase."""

    @pytest.mark.asyncio
    async def test_deletes_event_and_invitations(self, unit_env):
        event_repo = await unit_env.get(EventRepository)
        event = await event_repo.save(make_event())
        invitation_service = await unit_env.get(InvitationService)
        invitation = await invitation_service.issue(event.id, DeliveryMethod.LINK)
        use_case = await unit_env.get(DeleteEventUseCase)

        await use_case.execute(DeleteEventRequest(event_id=event.id))

        assert await event_repo.find_by_id(event.id) is None
        invitation_repo = await unit_env.get(InvitationRepository)
        assert await invitation_repo.find_by_token(invitation.token) is None

    @pytest.mark.asyncio
    async def test_unknown_event(self, unit_env):
        use_case = await unit_env.get(DeleteEventUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteEventRequest(event_id=uuid4()))
