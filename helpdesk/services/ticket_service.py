import logging
import secrets
import string
from collections.abc import Callable
from typing import Any

from helpdesk.core.clock import now_ms
from helpdesk.core.errors import InvalidInputError, TicketNotFoundError
from helpdesk.models.entities import StoreEntity, TicketEntity
from helpdesk.models.schemas.ticket import (
    TicketCreateRequest,
    TicketDeleteRequest,
    TicketRead,
    TicketStatusRequest,
    TicketSummary,
    TicketUpdateRequest,
)
from helpdesk.repositories.ticket_store import TicketStore

logger = logging.getLogger(__name__)

ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 9


def generate_ticket_id(existing: set[str] | None = None) -> str:
    """Random base-36 id (about 46 bits), redrawn if it collides with ``existing``."""
    taken = existing or set()
    while True:
        candidate = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
        if candidate not in taken:
            return candidate


class TicketService:
    def __init__(
        self,
        ticket_store: TicketStore,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.ticket_store = ticket_store
        self.clock = clock

    def list_ticket_summaries(self) -> list[TicketSummary]:
        with self.ticket_store.locked():
            store = self.ticket_store.load()
        return [self._to_ticket_summary(ticket) for ticket in store.tickets]

    def get_ticket(self, ticket_id: str | None) -> TicketRead:
        ticket_id = self._require_id(ticket_id)
        with self.ticket_store.locked():
            store = self.ticket_store.load()
        return self._to_ticket_read(self._find_or_raise(store, ticket_id))

    def create_ticket(self, payload: TicketCreateRequest) -> TicketRead:
        if not payload.name:
            raise InvalidInputError("TICKET_NAME_REQUIRED", "Name is required")

        with self.ticket_store.locked():
            store = self.ticket_store.load()
            ticket = TicketEntity(
                id=generate_ticket_id(store.ids()),
                name=payload.name,
                description=payload.description or "",
                status=bool(payload.status),
                created=self.clock(),
            )
            store.tickets.append(ticket)
            self.ticket_store.save(store)

        logger.info("Created ticket %s", ticket.id)
        return self._to_ticket_read(ticket)

    def update_ticket(self, payload: TicketUpdateRequest) -> TicketRead:
        ticket_id = self._require_id(payload.id)

        with self.ticket_store.locked():
            store = self.ticket_store.load()
            ticket = self._find_or_raise(store, ticket_id)

            # Empty name/description keep the stored value; status applies
            # whenever the field was sent, including false.
            ticket.name = payload.name or ticket.name
            ticket.description = payload.description or ticket.description
            if "status" in payload.model_fields_set:
                ticket.status = self._coerce_status(payload.status)

            self.ticket_store.save(store)

        return self._to_ticket_read(ticket)

    def delete_ticket(self, payload: TicketDeleteRequest) -> None:
        ticket_id = self._require_id(payload.id)

        with self.ticket_store.locked():
            store = self.ticket_store.load()
            remaining = [ticket for ticket in store.tickets if ticket.id != ticket_id]
            if len(remaining) == len(store.tickets):
                raise TicketNotFoundError(ticket_id)

            store.tickets = remaining
            self.ticket_store.save(store)

        logger.info("Deleted ticket %s", ticket_id)

    def set_ticket_status(self, payload: TicketStatusRequest) -> TicketRead:
        ticket_id = self._require_id(payload.id)
        if "status" not in payload.model_fields_set:
            raise InvalidInputError("TICKET_STATUS_REQUIRED", "ID and status are required")

        with self.ticket_store.locked():
            store = self.ticket_store.load()
            ticket = self._find_or_raise(store, ticket_id)
            ticket.status = self._coerce_status(payload.status)
            self.ticket_store.save(store)

        return self._to_ticket_read(ticket)

    def _find_or_raise(self, store: StoreEntity, ticket_id: str) -> TicketEntity:
        ticket = store.find(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return ticket

    def _require_id(self, ticket_id: str | None) -> str:
        if not ticket_id:
            raise InvalidInputError("TICKET_ID_REQUIRED", "ID is required")
        return ticket_id

    def _coerce_status(self, value: Any) -> bool:
        return bool(value)

    def _to_ticket_summary(self, ticket: TicketEntity) -> TicketSummary:
        return TicketSummary(
            id=ticket.id,
            name=ticket.name,
            status=ticket.status,
            created=ticket.created,
        )

    def _to_ticket_read(self, ticket: TicketEntity) -> TicketRead:
        return TicketRead(
            id=ticket.id,
            name=ticket.name,
            description=ticket.description,
            status=ticket.status,
            created=ticket.created,
        )
