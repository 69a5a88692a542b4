from typing import Any

from pydantic import BaseModel


class TicketCreateRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    status: Any = None


class TicketUpdateRequest(BaseModel):
    """Partial update; ``status`` is applied only when present in the body."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    status: Any = None


class TicketDeleteRequest(BaseModel):
    id: str | None = None


class TicketStatusRequest(BaseModel):
    id: str | None = None
    status: Any = None


class TicketSummary(BaseModel):
    id: str
    name: str
    status: bool
    created: int


class TicketRead(TicketSummary):
    description: str


class TicketCreateResponse(BaseModel):
    success: bool = True
    id: str
    ticket: TicketRead


class TicketDataResponse(BaseModel):
    success: bool = True
    ticket: TicketRead


class TicketDeleteResponse(BaseModel):
    success: bool = True
