"""Business services."""

from helpdesk.services.health_service import HealthService
from helpdesk.services.ticket_service import TicketService

__all__ = ["HealthService", "TicketService"]
