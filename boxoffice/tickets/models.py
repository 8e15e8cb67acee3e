from __future__ import annotations

import logging
import random
import string
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from .rendering import render_ticket
from .validation import (
    ID_LENGTH,
    ValidationMessage,
    is_valid_event_code,
    is_valid_id,
    is_valid_sector,
    is_valid_venue,
    is_valid_weight,
    parse_price,
)

logger = logging.getLogger(__name__)

# Marks "no id supplied" so an explicit ``ticket_id=None`` still reaches the setter.
_GENERATE_ID: Any = object()


def generate_ticket_id() -> str:
    """Return a random id made of uppercase English letters, e.g. ``ABCD``."""

    return "".join(random.choices(string.ascii_uppercase, k=ID_LENGTH))


class Ticket:
    """Admission to a single event.

    Every field may be unset (``None``) except :attr:`time`, which falls back to
    the creation moment. Setters validate their input and keep the previous
    value when it is rejected, logging a warning instead of raising. The
    backpack weight is the exception: invalid weights are dropped without a
    diagnostic.

    ``Ticket()`` builds an empty ticket, ``Ticket(venue, event_code, time)`` a
    partial one, and passing ``ticket_id`` together with the remaining keyword
    arguments gives full control. An id is generated whenever ``ticket_id`` is
    omitted.
    """

    def __init__(
        self,
        venue: str | None = None,
        event_code: int | None = None,
        time: datetime | None = None,
        *,
        ticket_id: str | None = _GENERATE_ID,
        is_promo: bool | None = None,
        sector: str | None = None,
        allowed_weight_kg: float | Decimal | None = None,
        price: Decimal | int | str | None = None,
    ) -> None:
        self._id: str | None = None
        self._venue: str | None = None
        self._event_code: int | None = None
        self._time: datetime | None = None
        self._is_promo: bool | None = None
        self._sector: str | None = None
        self._allowed_weight_kg: float | Decimal | None = None
        self._price: Decimal | None = None

        self.id = generate_ticket_id() if ticket_id is _GENERATE_ID else ticket_id
        self.venue = venue
        self.event_code = event_code
        self.time = time
        self.is_promo = is_promo
        self.sector = sector
        self.allowed_weight_kg = allowed_weight_kg
        self.price = price

    @property
    def id(self) -> str | None:
        return self._id

    @id.setter
    def id(self, value: str | None) -> None:
        if value is None:
            logger.warning(ValidationMessage.NULL_ID)
        elif not is_valid_id(value):
            logger.warning(ValidationMessage.INVALID_ID)
        else:
            self._id = value

    @property
    def venue(self) -> str | None:
        return self._venue

    @venue.setter
    def venue(self, value: str | None) -> None:
        if is_valid_venue(value):
            self._venue = value
        else:
            logger.warning(ValidationMessage.VENUE_TOO_LONG)

    @property
    def event_code(self) -> int | None:
        return self._event_code

    @event_code.setter
    def event_code(self, value: int | None) -> None:
        if is_valid_event_code(value):
            self._event_code = value
        else:
            logger.warning(ValidationMessage.INVALID_EVENT_CODE)

    @property
    def time(self) -> datetime:
        return self._time

    @time.setter
    def time(self, value: datetime | None) -> None:
        self._time = value if value is not None else datetime.now(timezone.utc)

    @property
    def is_promo(self) -> bool | None:
        return self._is_promo

    @is_promo.setter
    def is_promo(self, value: bool | None) -> None:
        self._is_promo = value

    @property
    def sector(self) -> str | None:
        return self._sector

    @sector.setter
    def sector(self, value: str | None) -> None:
        if is_valid_sector(value):
            self._sector = value
        else:
            logger.warning(ValidationMessage.INVALID_SECTOR)

    @property
    def allowed_weight_kg(self) -> float | Decimal | None:
        return self._allowed_weight_kg

    @allowed_weight_kg.setter
    def allowed_weight_kg(self, value: float | Decimal | None) -> None:
        # Rejected weights are not reported.
        if is_valid_weight(value):
            self._allowed_weight_kg = value

    @property
    def price(self) -> Decimal | None:
        return self._price

    @price.setter
    def price(self, value: Decimal | int | str | None) -> None:
        if value is None:
            self._price = None
            return
        try:
            amount = parse_price(value)
        except ValueError:
            logger.warning(ValidationMessage.INVALID_PRICE)
            return
        if amount < 0:
            logger.warning(ValidationMessage.NEGATIVE_PRICE)
            return
        self._price = amount

    def render(self) -> str:
        return render_ticket(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Ticket(id={self._id!r}, venue={self._venue!r}, event_code={self._event_code!r}, "
            f"time={self._time!r}, is_promo={self._is_promo!r}, sector={self._sector!r}, "
            f"allowed_weight_kg={self._allowed_weight_kg!r}, price={self._price!r})"
        )
