from helpdesk.models.schemas.health import StoreHealth
from helpdesk.repositories.ticket_store import CorruptStoreError, JsonTicketStore, parse_store


class HealthRepository:
    def __init__(self, ticket_store: JsonTicketStore) -> None:
        self.ticket_store = ticket_store

    def check_store(self) -> StoreHealth:
        """Inspect the store file without triggering seed recovery."""
        try:
            with self.ticket_store.locked():
                raw = self.ticket_store.path.read_text(encoding="utf-8")
            store = parse_store(raw)
        except (OSError, UnicodeDecodeError, CorruptStoreError) as exc:
            return StoreHealth(readable=False, message=str(exc))
        return StoreHealth(readable=True, ticket_count=len(store.tickets))
