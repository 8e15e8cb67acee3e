"""Display helpers over collections of tickets."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, TextIO

from .models import Ticket


def tickets_by_sector(sector: str, tickets: Iterable[Ticket]) -> Iterator[Ticket]:
    """Yield the tickets seated in ``sector``; unset sectors never match."""

    for ticket in tickets:
        if ticket.sector is not None and ticket.sector == sector:
            yield ticket


def show_tickets_by_sector(
    sector: str,
    tickets: Iterable[Ticket],
    stream: TextIO | None = None,
) -> List[Ticket]:
    """Print every ticket of ``sector`` and return the printed tickets."""

    stream = stream or sys.stdout
    matches = []
    for ticket in tickets_by_sector(sector, tickets):
        print(ticket, file=stream)
        matches.append(ticket)
    return matches
