"""Operator authentication for admin routes."""

from uuid import UUID

from fastapi import HTTPException, status

from hunt.domain.service import JWTService
from hunt.domain.value import OperatorId
from hunt.util.jwt import JWTError

BEARER_PREFIX = "bearer "


def authenticate_operator(
    jwt_service: JWTService, authorization: str | None
) -> OperatorId:
    """Resolve the operator behind an ``Authorization: Bearer`` header.

    Args:
        jwt_service: JWT service from DI
        authorization: Raw Authorization header value

    Returns:
        ID of the authenticated operator

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization[len(BEARER_PREFIX) :].strip()
    try:
        payload = jwt_service.verify_token(token)
        return OperatorId(UUID(payload.operator_id))
    except (JWTError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e) if isinstance(e, JWTError) else "Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
