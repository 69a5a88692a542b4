from __future__ import annotations

import argparse
from pathlib import Path

from helpdesk.core.config import get_settings
from helpdesk.core.logging import configure_logging
from helpdesk.repositories.ticket_store import JsonTicketStore


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reset the helpdesk ticket store to seed data.")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Store file to reset (defaults to DATA_FILE from settings).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()
    configure_logging(settings.log_level)

    ticket_store = JsonTicketStore(args.data_file or settings.data_file)
    store = ticket_store.reset()
    print(f"Reset {ticket_store.path} with {len(store.tickets)} seed tickets.")


if __name__ == "__main__":
    main()
