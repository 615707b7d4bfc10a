"""Invitation admin routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from hunt.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    DispatchResult,
    ListAuditRecordsRequest,
    ListAuditRecordsResponse,
    ListAuditRecordsUseCase,
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    SetInvitationActiveRequest,
    SetInvitationActiveResponse,
    SetInvitationActiveUseCase,
)
from hunt.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from hunt.domain.service import JWTService
from hunt.domain.value import DeliveryMethod, DispatchOutcome
from hunt.interface.api.security import authenticate_operator

router = APIRouter(
    prefix="/admin/events/{event_id}",
    tags=["invitations"],
    route_class=DishkaRoute,
)


class CreateInvitationAPIRequest(BaseModel):
    """API request for creating an invitation."""

    delivery_method: DeliveryMethod = DeliveryMethod.LINK
    recipient: str | None = None


class SetInvitationActiveAPIRequest(BaseModel):
    """API request for toggling an invitation."""

    is_active: bool


@router.post(
    "/invitations",
    response_model=CreateInvitationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_429_TOO_MANY_REQUESTS: {"model": CreateInvitationResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": CreateInvitationResponse},
    },
)
async def create_invitation(
    event_id: UUID,
    request: CreateInvitationAPIRequest,
    create_invitation_use_case: FromDishka[CreateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
):
    """Create an invitation and, for EMAIL, send it.

    Rate limited and failed dispatches are recorded in the audit trail,
    so they are returned as responses rather than raised; raising would
    roll back the request session and lose the record.

    Args:
        event_id: Event to invite to
        request: Delivery method and optional recipient
        create_invitation_use_case: Create invitation use case from DI
        jwt_service: JWT service from DI
        authorization: Bearer token of the operator

    Returns:
        201 with the invitation, 429 when rate limited, 502 when the
        email could not be delivered

    Raises:
        HTTPException: 400 for invalid or disabled requests, 404 for
            unknown events
    """
    operator_id = authenticate_operator(jwt_service, authorization)

    try:
        response = await create_invitation_use_case.execute(
            CreateInvitationRequest(
                event_id=event_id,
                delivery_method=request.delivery_method,
                recipient=request.recipient,
                operator_id=operator_id,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, BusinessRuleViolationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if response.result == DispatchResult.RATE_LIMITED:
        headers = {}
        if response.retry_after_seconds is not None:
            headers["Retry-After"] = str(response.retry_after_seconds)
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content=response.model_dump(mode="json"),
            headers=headers,
        )

    if response.result == DispatchResult.FAILED:
        logfire.warn("Invitation email failed", event_id=str(event_id))
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=response.model_dump(mode="json"),
        )

    return response


@router.get("/invitations", response_model=ListInvitationsResponse)
async def list_invitations(
    event_id: UUID,
    list_invitations_use_case: FromDishka[ListInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListInvitationsResponse:
    """List the invitations of an event, newest first."""
    authenticate_operator(jwt_service, authorization)

    try:
        return await list_invitations_use_case.execute(
            ListInvitationsRequest(event_id=event_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put(
    "/invitations/{invitation_id}", response_model=SetInvitationActiveResponse
)
async def set_invitation_active(
    event_id: UUID,
    invitation_id: UUID,
    request: SetInvitationActiveAPIRequest,
    set_invitation_active_use_case: FromDishka[SetInvitationActiveUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> SetInvitationActiveResponse:
    """Activate or deactivate an invitation.

    Raises:
        HTTPException: 404 if the invitation does not belong to the event
    """
    authenticate_operator(jwt_service, authorization)

    try:
        return await set_invitation_active_use_case.execute(
            SetInvitationActiveRequest(
                event_id=event_id,
                invitation_id=invitation_id,
                active=request.is_active,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/audit-records", response_model=ListAuditRecordsResponse)
async def list_audit_records(
    event_id: UUID,
    list_audit_records_use_case: FromDishka[ListAuditRecordsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    status_filter: DispatchOutcome | None = Query(default=None, alias="status"),
) -> ListAuditRecordsResponse:
    """List the latest dispatch audit records of an event.

    Unknown status values are rejected with 422.
    """
    authenticate_operator(jwt_service, authorization)

    return await list_audit_records_use_case.execute(
        ListAuditRecordsRequest(event_id=event_id, status=status_filter)
    )
