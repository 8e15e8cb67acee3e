"""Field constraints for ticket records.

The predicates here never raise; the ticket setters decide what to do with a
rejected value. Messages are kept in :class:`ValidationMessage` so the setters,
the log output and the tests all agree on the wording.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from numbers import Real
from typing import Any

ID_LENGTH = 4
VENUE_MAX_LENGTH = 10
EVENT_CODE_MIN = 1
EVENT_CODE_MAX = 999
SECTORS: tuple[str, ...] = ("A", "B", "C")

_ID_PATTERN = re.compile(rf"[A-Z]{{{ID_LENGTH}}}")


class ValidationMessage(str, Enum):
    """Diagnostics emitted when a ticket field rejects a value."""

    NULL_ID = "Id cannot be null"
    INVALID_ID = "Incorrect id format"
    VENUE_TOO_LONG = f"Maximum {VENUE_MAX_LENGTH} characters are allowed"
    INVALID_EVENT_CODE = "Incorrect event code format"
    INVALID_SECTOR = "Invalid stadium sector"
    NEGATIVE_PRICE = "Price can not be negative"
    INVALID_PRICE = "Incorrect price format"

    def __str__(self) -> str:
        return self.value


def is_valid_id(value: Any) -> bool:
    return isinstance(value, str) and _ID_PATTERN.fullmatch(value) is not None


def is_valid_venue(value: Any) -> bool:
    return value is None or (isinstance(value, str) and len(value) <= VENUE_MAX_LENGTH)


def is_valid_event_code(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return EVENT_CODE_MIN <= value <= EVENT_CODE_MAX


def is_valid_sector(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value in SECTORS)


def is_valid_weight(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value >= 0
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value >= 0


def parse_price(value: Any) -> Decimal:
    """Convert ``value`` to a :class:`~decimal.Decimal`.

    Floats are converted through their ``str`` form so ``19.99`` stays
    ``Decimal("19.99")``. Raises ``ValueError`` for anything that is not a
    finite number.
    """

    if isinstance(value, bool):
        raise ValueError(f"Unsupported price value: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Unsupported price value: {value!r}") from exc
    else:
        raise ValueError(f"Unsupported price value: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Unsupported price value: {value!r}")
    return amount
