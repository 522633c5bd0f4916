"""MongoDB-backed implementation of OrderRepository."""

from __future__ import annotations

from typing import Any

from bson import Decimal128, ObjectId
from pymongo.database import Database

from lessonshop.domain.model.order import Order, OrderLineItem
from lessonshop.domain.model.value_objects import LessonId, Money, Quantity
from lessonshop.domain.repository.order_repository import OrderRepository
from lessonshop.infrastructure.persistence.store_errors import store_errors

ORDERS_COLLECTION = "orders"


class MongoOrderRepository(OrderRepository):

    def __init__(self, database: Database) -> None:
        self._collection = database[ORDERS_COLLECTION]

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        if not ObjectId.is_valid(order_id):
            return None
        with store_errors("get order"):
            raw = self._collection.find_one({"_id": ObjectId(order_id)})
        return self._to_domain(raw) if raw is not None else None

    def add(self, order: Order) -> str:
        with store_errors("insert order"):
            result = self._collection.insert_one(self._to_raw(order))
        order.id = str(result.inserted_id)
        return order.id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict[str, Any]:
        return {
            "name": order.name,
            "phone": order.phone,
            "items": [
                {
                    "lessonId": item.lesson_id.value,
                    "quantity": item.quantity.value,
                    "price": Decimal128(item.price.amount),
                }
                for item in order.items
            ],
            "totalPrice": Decimal128(order.total_price.amount),
            "createdAt": order.created_at,
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Order:
        items = [
            OrderLineItem(
                lesson_id=LessonId(i["lessonId"]),
                quantity=Quantity(i["quantity"]),
                price=Money(i["price"].to_decimal()),
            )
            for i in raw["items"]
        ]
        return Order(
            id=str(raw["_id"]),
            name=raw["name"],
            phone=raw["phone"],
            items=items,
            created_at=raw["createdAt"],
        )
