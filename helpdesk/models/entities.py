from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class TicketEntity:
    id: str
    name: str
    description: str
    status: bool
    created: int
    # Keys found in the store file that the service does not manage.
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class StoreEntity:
    tickets: list[TicketEntity] = field(default_factory=list)

    def find(self, ticket_id: str) -> TicketEntity | None:
        for ticket in self.tickets:
            if ticket.id == ticket_id:
                return ticket
        return None

    def ids(self) -> set[str]:
        return {ticket.id for ticket in self.tickets}
