"""Observability configuration using Logfire.

Join tokens are bearer capabilities and SMTP passwords are secrets; neither
may reach a span or log. Services log ``InviteToken.redacted`` instead of
the token, and the helpers here keep the automatic instrumentation from
capturing them.

Usage:
    import logfire

    logfire.info("Invitation issued", invitation_id=str(invitation.id))

    with logfire.span("create_invitation.execute", event_id=str(event_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hunt.config import Settings

# Attributes whose values embed a join token. Logfire already scrubs
# password, secret, auth and jwt attributes.
SCRUB_PATTERNS = ["join_link", "invite_link"]

# Requests whose URL embeds a join token are not traced automatically
UNTRACED_URLS = "/join/.*"

REDACTED = "[redacted]"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending:
    - OBSERVABILITY__SEND_TO_LOGFIRE wins when set
    - otherwise on if OBSERVABILITY__LOGFIRE_TOKEN is present
    - otherwise console only

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "cachehunt-api",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "scrubbing": logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def redact_request_attributes(request, attributes: dict) -> dict:
    """Request attributes for FastAPI spans, with join tokens blanked out.

    Args:
        request: Incoming request (HTTP or WebSocket)
        attributes: Attributes Logfire collected (endpoint ``values``, ``errors``)

    Returns:
        Attributes to record
    """
    result = {**attributes}

    values = result.get("values")
    if isinstance(values, dict) and "token" in values:
        result["values"] = {**values, "token": REDACTED}

    if hasattr(request, "method"):
        result["method"] = request.method

    if hasattr(request, "client") and request.client:
        result["client_host"] = request.client.host

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Headers are not captured: the Authorization header carries operator
    tokens.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=redact_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")
