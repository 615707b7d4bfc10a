"""System status routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from hunt.domain.service import DeliverySettingsService, JWTService
from hunt.interface.api.security import authenticate_operator

router = APIRouter(prefix="/admin", tags=["system"], route_class=DishkaRoute)


class SystemStatusResponse(BaseModel):
    """Read-only capabilities an admin client adapts to."""

    email_sending_enabled: bool
    max_per_hour: int | None
    max_per_day: int | None


@router.get("/system-status", response_model=SystemStatusResponse)
async def system_status(
    delivery_settings_service: FromDishka[DeliverySettingsService],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> SystemStatusResponse:
    """Report whether EMAIL invitations can be sent right now.

    Clients use this to hide the EMAIL option while mail is not configured.
    """
    authenticate_operator(jwt_service, authorization)

    settings = await delivery_settings_service.current()
    return SystemStatusResponse(
        email_sending_enabled=settings.email_sending_enabled,
        max_per_hour=settings.max_per_hour,
        max_per_day=settings.max_per_day,
    )
