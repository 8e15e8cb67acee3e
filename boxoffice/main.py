"""Demo runner printing a few sample tickets."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from boxoffice.core.config import Settings, get_settings
from boxoffice.core.logging import configure_logging
from boxoffice.tickets import Ticket, show_tickets_by_sector

PARTIAL_TICKET_TIME = datetime(2024, 9, 29, 10, 0, tzinfo=timezone.utc)
FULL_TICKET_TIME = datetime(2024, 10, 30, 11, 0, tzinfo=timezone.utc)


def build_sample_tickets(settings: Settings) -> List[Ticket]:
    """Return the empty, partial and fully specified sample tickets."""

    empty_ticket = Ticket()
    partial_ticket = Ticket("Part Hall", 123, PARTIAL_TICKET_TIME)
    full_ticket = Ticket(
        "Full Hall",
        456,
        FULL_TICKET_TIME,
        ticket_id="RFDS",
        is_promo=True,
        sector="C",
        allowed_weight_kg=10.5,
        price=settings.demo_price,
    )
    return [empty_ticket, partial_ticket, full_ticket]


def main() -> int:
    settings = get_settings()
    logger = configure_logging(settings)
    logger.debug("Building sample tickets (%s)", settings.environment)

    tickets = build_sample_tickets(settings)
    for ticket in tickets:
        print(ticket)

    print(f"Tickets in sector {settings.demo_sector}:")
    matches = show_tickets_by_sector(settings.demo_sector, tickets)
    logger.info("Printed %d ticket(s), %d in sector %s", len(tickets), len(matches), settings.demo_sector)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
