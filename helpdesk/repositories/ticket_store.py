import json
import logging
import os
import stat
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from helpdesk.core.clock import now_ms
from helpdesk.core.errors import StoreError
from helpdesk.core.storage import get_data_file, get_store_lock
from helpdesk.models.entities import StoreEntity, TicketEntity
from helpdesk.models.schemas.store import StoreDocument, TicketRecord

logger = logging.getLogger(__name__)

ONE_DAY_MS = 86_400_000


class CorruptStoreError(Exception):
    """The store file is missing, empty, or not a valid ticket document."""


class TicketStore(Protocol):
    def locked(self) -> Any:
        """Context manager serializing load-mutate-save cycles."""

    def load(self) -> StoreEntity:
        """Read the whole store, recovering once from a corrupt file."""

    def save(self, store: StoreEntity) -> None:
        """Persist the whole store."""

    def reset(self) -> StoreEntity:
        """Replace the store with seed data."""


def seed_store(now: int | None = None) -> StoreEntity:
    created = now_ms() if now is None else now
    return StoreEntity(
        tickets=[
            TicketEntity(
                id="1",
                name="Printer problem",
                description="The printer does not print documents",
                status=False,
                created=created,
            ),
            TicketEntity(
                id="2",
                name="Update software",
                description="Windows needs to be updated to the latest version",
                status=True,
                created=created - ONE_DAY_MS,
            ),
        ]
    )


def _to_ticket_entity(record: TicketRecord) -> TicketEntity:
    return TicketEntity(
        id=record.id,
        name=record.name,
        description=record.description,
        status=record.status,
        created=record.created,
        extra=dict(record.model_extra or {}),
    )


def _to_row(ticket: TicketEntity) -> dict[str, Any]:
    return {
        **ticket.extra,
        "id": ticket.id,
        "name": ticket.name,
        "description": ticket.description,
        "status": ticket.status,
        "created": ticket.created,
    }


def parse_store(raw: str) -> StoreEntity:
    if not raw.strip():
        raise CorruptStoreError("Store file is empty.")
    try:
        document = StoreDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise CorruptStoreError(str(exc)) from exc
    return StoreEntity(
        tickets=[_to_ticket_entity(record) for record in document.tickets]
    )


def dump_store(store: StoreEntity) -> str:
    document = {"tickets": [_to_row(ticket) for ticket in store.tickets]}
    return json.dumps(document, indent=2, ensure_ascii=False)


class JsonTicketStore:
    """Whole-file JSON store: every load reads and every save rewrites the file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path is not None else get_data_file()
        self._lock = get_store_lock(self.path)

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def load(self) -> StoreEntity:
        with self._lock:
            try:
                return self._read()
            except CorruptStoreError as exc:
                logger.warning("Ticket store %s is unusable (%s); restoring seed data", self.path, exc)

            self.reset()
            try:
                return self._read()
            except CorruptStoreError as exc:
                raise StoreError("Failed to read ticket store.", details=str(exc)) from exc

    def save(self, store: StoreEntity) -> None:
        payload = dump_store(store)
        with self._lock:
            self._write(payload)

    def reset(self) -> StoreEntity:
        store = seed_store()
        with self._lock:
            self._write(dump_store(store))
        logger.info("Wrote seed tickets to %s", self.path)
        return store

    def _read(self) -> StoreEntity:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise CorruptStoreError("Store file does not exist.") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CorruptStoreError(str(exc)) from exc
        return parse_store(raw)

    def _write(self, payload: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            mode = self._target_mode()
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                # mkstemp creates 0600; keep the mode readers of the store expect.
                os.chmod(tmp_name, mode)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error("Failed to write ticket store %s: %s", self.path, exc)
            raise StoreError("Failed to write ticket store.", details=str(exc)) from exc

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
