"""Input value objects for cost strategies."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Raised when a strategy input violates its constraints."""

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {reason}")


def _check_label(field: str, value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        logger.warning(f"Rejected {field}={value!r}")
        raise InvalidInput(field, value, "must be a non-empty string")
    return value


def _check_quantity(field: str, value: object) -> float:
    # bool is an int subclass but never a meaningful weight or amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning(f"Rejected {field}={value!r}")
        raise InvalidInput(field, value, "must be a number")
    number = float(value) + 0.0  # folds -0.0 into 0.0
    if not math.isfinite(number):
        logger.warning(f"Rejected {field}={value!r}")
        raise InvalidInput(field, value, "must be finite")
    if number < 0:
        logger.warning(f"Rejected {field}={value!r}")
        raise InvalidInput(field, value, "must be >= 0")
    return number


@dataclass(frozen=True)
class ShipmentInput:
    """A parcel to ship: where it goes and how much it weighs (kg)."""

    destination: str
    weight: float

    def __post_init__(self):
        _check_label("destination", self.destination)
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "weight", _check_quantity("weight", self.weight))


@dataclass(frozen=True)
class PaymentInput:
    """A payment: the account being charged and the amount."""

    account: str
    amount: float

    def __post_init__(self):
        _check_label("account", self.account)
        object.__setattr__(self, "amount", _check_quantity("amount", self.amount))
