"""Text rendering for ticket records."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_DOWN, Context, Decimal
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import Ticket

NOT_AVAILABLE = "N/A"
VENUE_WIDTH = 10

# Fixed widths counted into the separator rule next to the time and sector texts.
_RULE_PADDING = 6 + 10 + VENUE_WIDTH + 11

_CENTS = Decimal("0.01")

TEMPLATE = (
    "{rule}\n"
    "Ticket id: {id} | EventCode: {event_code}\n"
    "Date: {time} UTC | Venue: {venue:<{venue_width}} | Sector: {sector}\n"
    "is{promo}Promo | Price: {price}\n"
    "Allowed Weight: {weight} kg\n"
)


def format_value(value: Any) -> str:
    """Return ``str(value)`` or ``N/A`` for unset fields."""

    return NOT_AVAILABLE if value is None else str(value)


def format_amount(value: Decimal | float | int | None) -> str:
    """Format a number with two decimals, truncating rather than rounding."""

    if value is None:
        return NOT_AVAILABLE
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    # Enough precision to keep every integer digit plus the cents.
    context = Context(prec=max(28, amount.adjusted() + 3))
    return f"{amount.quantize(_CENTS, rounding=ROUND_DOWN, context=context):f}"


def format_time(value: Any) -> str:
    """Format ``value`` as an ISO-8601 UTC instant such as ``2024-10-30T11:00:00Z``.

    Naive datetimes are read as UTC. Fractional seconds are only shown when
    present, in milliseconds where that is exact. Values that are not datetimes
    fall back to their plain text.
    """

    if not isinstance(value, datetime):
        return format_value(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc).replace(tzinfo=None)
    if value.microsecond == 0:
        timespec = "seconds"
    elif value.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return value.isoformat(timespec=timespec) + "Z"


def render_ticket(ticket: Ticket) -> str:
    """Render the multi-line summary block for ``ticket``."""

    time_text = format_time(ticket.time)
    sector_text = format_value(ticket.sector)
    return TEMPLATE.format(
        rule="-" * (_RULE_PADDING + len(time_text) + len(sector_text)),
        id=format_value(ticket.id),
        event_code=format_value(ticket.event_code),
        time=time_text,
        venue=format_value(ticket.venue),
        venue_width=VENUE_WIDTH,
        sector=sector_text,
        promo=" " if ticket.is_promo else " not ",
        price=format_amount(ticket.price),
        weight=format_amount(ticket.allowed_weight_kg),
    )
