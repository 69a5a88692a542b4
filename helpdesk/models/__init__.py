"""Domain models and API schemas."""

from helpdesk.models.entities import StoreEntity, TicketEntity

__all__ = ["StoreEntity", "TicketEntity"]
