"""Domain service: Capacity Reservation.

Reserves lesson spaces for every line item of an order. Each reservation
is one atomic conditional decrement in the store, so two orders racing
for the last seats can never both succeed.

Reservations are applied item by item. If any item cannot be reserved,
or the store fails midway, every reservation already applied for the
same order is compensated before the error propagates.
"""

from __future__ import annotations

import logging

from lessonshop.domain.exceptions import InsufficientCapacity
from lessonshop.domain.model.order import Order, OrderLineItem
from lessonshop.domain.repository.lesson_repository import LessonRepository

logger = logging.getLogger(__name__)


class CapacityReservationService:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def reserve_for_order(self, order: Order) -> None:
        """Reserve spaces for every line item, all or nothing."""
        reserved: list[OrderLineItem] = []
        try:
            for line in order.items:
                qty = line.quantity.value
                if not self._lesson_repo.reserve_spaces(line.lesson_id, qty):
                    raise InsufficientCapacity(
                        f"Insufficient spaces for lesson {line.lesson_id} (need {qty})"
                    )
                reserved.append(line)
        except Exception:
            self.release(reserved)
            raise

    def release_for_order(self, order: Order) -> None:
        """Give back the spaces reserved for every line item."""
        self.release(order.items)

    def release(self, lines: list[OrderLineItem]) -> None:
        """Compensate reservations, newest first.

        Keeps going when one compensation fails so the others still land;
        failures are logged since the caller is already propagating an error.
        """
        for line in reversed(lines):
            try:
                self._lesson_repo.release_spaces(line.lesson_id, line.quantity.value)
            except Exception:
                logger.exception(
                    "Failed to release %s spaces on lesson %s",
                    line.quantity.value,
                    line.lesson_id,
                )
            else:
                logger.warning(
                    "Released %s spaces on lesson %s",
                    line.quantity.value,
                    line.lesson_id,
                )
