"""Order aggregate.

An Order owns its line items. Each line item stores the lesson price
that was current when the order was placed, so later catalog price
changes never rewrite order history. Orders are append-only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from lessonshop.domain.exceptions import InvalidPayload
from lessonshop.domain.model.value_objects import LessonId, Money, Quantity

MAX_LINE_ITEMS = 50


@dataclass(frozen=True)
class OrderLineItem:
    """A reserved quantity of one lesson at a locked price."""

    lesson_id: LessonId
    quantity: Quantity
    price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for lesson orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules. The ``__init__`` stays simple so the repository can
    reconstitute persisted orders without re-validating.
    """

    id: str | None
    name: str
    phone: str
    items: list[OrderLineItem]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(name: str, phone: str, items: list[OrderLineItem]) -> Order:
        """Create a new order, enforcing all invariants."""
        if not isinstance(name, str) or not name.strip():
            raise InvalidPayload("Customer name is required")
        if not isinstance(phone, str) or not phone.strip():
            raise InvalidPayload("Customer phone is required")
        if not items:
            raise InvalidPayload("Order must contain at least one item")
        if len(items) > MAX_LINE_ITEMS:
            raise InvalidPayload(f"Maximum {MAX_LINE_ITEMS} items per order")

        return Order(id=None, name=name.strip(), phone=phone.strip(), items=list(items))

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
