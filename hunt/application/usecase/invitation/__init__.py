"""Invitation use cases."""

from hunt.application.usecase.invitation.common import InvitationItem
from hunt.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    DispatchResult,
)
from hunt.application.usecase.invitation.list_audit_records import (
    AuditRecordItem,
    ListAuditRecordsRequest,
    ListAuditRecordsResponse,
    ListAuditRecordsUseCase,
)
from hunt.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from hunt.application.usecase.invitation.resolve_join import (
    JoinStatus,
    ResolveJoinRequest,
    ResolveJoinResponse,
    ResolveJoinUseCase,
)
from hunt.application.usecase.invitation.set_invitation_active import (
    SetInvitationActiveRequest,
    SetInvitationActiveResponse,
    SetInvitationActiveUseCase,
)

__all__ = [
    "AuditRecordItem",
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "DispatchResult",
    "InvitationItem",
    "JoinStatus",
    "ListAuditRecordsRequest",
    "ListAuditRecordsResponse",
    "ListAuditRecordsUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "ResolveJoinRequest",
    "ResolveJoinResponse",
    "ResolveJoinUseCase",
    "SetInvitationActiveRequest",
    "SetInvitationActiveResponse",
    "SetInvitationActiveUseCase",
]
