"""Event admin routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Response, status

from hunt.application.usecase.event import DeleteEventRequest, DeleteEventUseCase
from hunt.domain.error import NotFoundError
from hunt.domain.service import JWTService
from hunt.interface.api.security import authenticate_operator

router = APIRouter(prefix="/admin/events", tags=["events"], route_class=DishkaRoute)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: UUID,
    delete_event_use_case: FromDishka[DeleteEventUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> Response:
    """Delete an event together with its invitations and audit records.

    Raises:
        HTTPException: 404 if the event does not exist
    """
    authenticate_operator(jwt_service, authorization)

    try:
        await delete_event_use_case.execute(DeleteEventRequest(event_id=event_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)
