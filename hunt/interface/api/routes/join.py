"""Public join routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from hunt.application.usecase.invitation import (
    JoinStatus,
    ResolveJoinRequest,
    ResolveJoinResponse,
    ResolveJoinUseCase,
)

router = APIRouter(prefix="/join", tags=["join"], route_class=DishkaRoute)

STATUS_CODES = {
    JoinStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    JoinStatus.INACTIVE: status.HTTP_410_GONE,
    JoinStatus.EXPIRED: status.HTTP_410_GONE,
}


@router.get("/{token}", response_model=ResolveJoinResponse)
async def resolve_join(
    token: str,
    resolve_join_use_case: FromDishka[ResolveJoinUseCase],
) -> ResolveJoinResponse:
    """Check a join link.

    Returns:
        Event and invitation summary for a usable token

    Raises:
        HTTPException: 404 for unknown tokens, 410 for inactive invitations
            and ended events (same message for both)
    """
    response = await resolve_join_use_case.execute(ResolveJoinRequest(token=token))

    if response.status != JoinStatus.VALID:
        raise HTTPException(
            status_code=STATUS_CODES[response.status], detail=response.message
        )

    return response
