from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field


class StoreHealth(BaseModel):
    readable: bool
    ticket_count: int | None = None
    message: str | None = None


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    service: str = "helpdesk-backend"
    environment: str
    store: StoreHealth
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class RootResponse(BaseModel):
    status: str = "OK"
    message: str = "HelpDesk API is running"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
