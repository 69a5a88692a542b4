from typing import Annotated

from fastapi import APIRouter, Depends

from helpdesk.core.config import Settings, get_settings
from helpdesk.models.schemas.health import HealthResponse
from helpdesk.repositories.health_repository import HealthRepository
from helpdesk.repositories.ticket_store import JsonTicketStore
from helpdesk.services.health_service import HealthService

router = APIRouter()


def get_health_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthService:
    return HealthService(
        repository=HealthRepository(JsonTicketStore(settings.data_file)),
        settings=settings,
    )


@router.get("/health", response_model=HealthResponse)
def health(
    health_service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthResponse:
    return health_service.get_health()
