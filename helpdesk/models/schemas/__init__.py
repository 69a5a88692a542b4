"""Pydantic schema definitions."""

from helpdesk.models.schemas.health import HealthResponse, RootResponse, StoreHealth
from helpdesk.models.schemas.store import StoreDocument, TicketRecord
from helpdesk.models.schemas.ticket import (
    TicketCreateRequest,
    TicketCreateResponse,
    TicketDataResponse,
    TicketDeleteRequest,
    TicketDeleteResponse,
    TicketRead,
    TicketStatusRequest,
    TicketSummary,
    TicketUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "RootResponse",
    "StoreDocument",
    "StoreHealth",
    "TicketCreateRequest",
    "TicketCreateResponse",
    "TicketDataResponse",
    "TicketDeleteRequest",
    "TicketDeleteResponse",
    "TicketRead",
    "TicketRecord",
    "TicketStatusRequest",
    "TicketSummary",
    "TicketUpdateRequest",
]
