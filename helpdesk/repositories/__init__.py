"""Ticket persistence."""

from helpdesk.repositories.health_repository import HealthRepository
from helpdesk.repositories.ticket_store import JsonTicketStore, TicketStore

__all__ = [
    "HealthRepository",
    "JsonTicketStore",
    "TicketStore",
]
