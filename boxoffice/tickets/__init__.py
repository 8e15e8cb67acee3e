"""Ticket entity, its validation rules and text rendering."""

from .models import Ticket, generate_ticket_id
from .queries import show_tickets_by_sector, tickets_by_sector
from .rendering import NOT_AVAILABLE, render_ticket
from .validation import SECTORS, ValidationMessage

__all__ = [
    "Ticket",
    "generate_ticket_id",
    "tickets_by_sector",
    "show_tickets_by_sector",
    "render_ticket",
    "NOT_AVAILABLE",
    "SECTORS",
    "ValidationMessage",
]
