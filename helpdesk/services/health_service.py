from helpdesk.core.config import Settings
from helpdesk.models.schemas.health import HealthResponse
from helpdesk.repositories.health_repository import HealthRepository


class HealthService:
    def __init__(self, repository: HealthRepository, settings: Settings) -> None:
        self.repository = repository
        self.settings = settings

    def get_health(self) -> HealthResponse:
        store_health = self.repository.check_store()
        status = "ok" if store_health.readable else "degraded"
        return HealthResponse(
            status=status,
            environment=self.settings.app_env,
            store=store_health,
        )
