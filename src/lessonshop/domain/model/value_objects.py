"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from bson import ObjectId

from lessonshop.domain.exceptions import InvalidIdentifier, InvalidPayload

# Largest integer the document store can hold.
MAX_INT64 = 2**63 - 1


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so an order total is exactly the sum of its line totals.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidPayload(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidPayload(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidPayload(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def to_float(self) -> float:
        return float(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise InvalidPayload(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPayload(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative spaces.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidPayload(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidPayload("Quantity must be positive")
        if self.value > MAX_INT64:
            raise InvalidPayload(f"Quantity cannot exceed {MAX_INT64}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class LessonId:
    """Opaque lesson identity, a 24-hex-digit document ID."""

    value: str

    @classmethod
    def parse(cls, raw: object) -> LessonId:
        if not isinstance(raw, str) or not ObjectId.is_valid(raw):
            raise InvalidIdentifier(f"Invalid lesson id: {raw!r}")
        return cls(raw)

    @classmethod
    def generate(cls) -> LessonId:
        return cls(str(ObjectId()))

    def __str__(self) -> str:
        return self.value
