"""Application service: Place Order use case.

Orchestrates the flow between repositories, the Order aggregate and the
capacity reservation service. An order moves through

    Validating -> Pricing -> ReservingCapacity -> Persisting -> Committed

and can be rejected at any step. A rejected order never leaves a
reservation behind.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lessonshop.application.dto import OrderItemSpec, OrderPlacedDTO
from lessonshop.domain.exceptions import (
    DomainException,
    InvalidIdentifier,
    InvalidPayload,
    LessonNotFound,
)
from lessonshop.domain.model.order import MAX_LINE_ITEMS, Order, OrderLineItem
from lessonshop.domain.model.value_objects import LessonId, Quantity
from lessonshop.domain.repository.lesson_repository import LessonRepository
from lessonshop.domain.repository.order_repository import OrderRepository
from lessonshop.domain.service.capacity_reservation_service import (
    CapacityReservationService,
)

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        lesson_repo: LessonRepository,
    ) -> None:
        self._order_repo = order_repo
        self._lesson_repo = lesson_repo

    def handle(
        self,
        name: str,
        phone: str,
        item_specs: Sequence[OrderItemSpec],
    ) -> OrderPlacedDTO:
        """Place a new order.

        Steps:
        1. Validate the payload (no store access).
        2. Look up each lesson and snapshot its *current* price; any
           client-supplied price or total is never consulted.
        3. Reserve spaces for every item, all or nothing.
        4. Persist the order; on failure release the reservations.
        """
        requested = self._validate(name, phone, item_specs)

        line_items: list[OrderLineItem] = []
        for lesson_id, quantity in requested:
            lesson = self._lesson_repo.get_by_id(lesson_id)
            if lesson is None:
                raise LessonNotFound(f"Lesson not found: '{lesson_id}'")
            line_items.append(
                OrderLineItem(
                    lesson_id=lesson.id,
                    quantity=quantity,
                    price=lesson.price,  # <-- price snapshot
                )
            )

        order = Order.create(name=name, phone=phone, items=line_items)

        reservations = CapacityReservationService(self._lesson_repo)
        try:
            reservations.reserve_for_order(order)
        except DomainException as exc:
            logger.info("Order for %s rejected: %s", order.name, exc)
            raise

        try:
            order_id = self._order_repo.add(order)
        except Exception:
            logger.warning("Persisting order for %s failed, rolling back", order.name)
            reservations.release_for_order(order)
            raise

        logger.info(
            "Order %s committed: %d item(s), total %s",
            order_id,
            len(order.items),
            order.total_price,
        )
        return OrderPlacedDTO(
            id=order_id,
            total_price=str(order.total_price),
            item_count=len(order.items),
        )

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def _validate(
        name: str,
        phone: str,
        item_specs: Sequence[OrderItemSpec],
    ) -> list[tuple[LessonId, Quantity]]:
        if not isinstance(name, str) or not name.strip():
            raise InvalidPayload("Customer name is required")
        if not isinstance(phone, str) or not phone.strip():
            raise InvalidPayload("Customer phone is required")
        if not item_specs:
            raise InvalidPayload("Order must contain at least one item")
        if len(item_specs) > MAX_LINE_ITEMS:
            raise InvalidPayload(f"Maximum {MAX_LINE_ITEMS} items per order")

        requested: list[tuple[LessonId, Quantity]] = []
        for spec in item_specs:
            try:
                lesson_id = LessonId.parse(spec.lesson_id)
            except InvalidIdentifier as exc:
                raise InvalidPayload(str(exc)) from exc
            requested.append((lesson_id, Quantity(spec.quantity)))
        return requested
