"""Event use cases."""

from hunt.application.usecase.event.delete_event import (
    DeleteEventRequest,
    DeleteEventUseCase,
)

__all__ = [
    "DeleteEventRequest",
    "DeleteEventUseCase",
]
