"""MongoDB-backed implementation of LessonRepository."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from bson import Decimal128, ObjectId
from pymongo.database import Database

from lessonshop.domain.model.lesson import Lesson, LessonPatch
from lessonshop.domain.model.value_objects import LessonId, Money
from lessonshop.domain.repository.lesson_repository import LessonRepository, UpdateResult
from lessonshop.infrastructure.persistence.store_errors import store_errors

LESSONS_COLLECTION = "lessons"


class MongoLessonRepository(LessonRepository):

    def __init__(self, database: Database) -> None:
        self._collection = database[LESSONS_COLLECTION]

    # --- LessonRepository interface -------------------------------------------

    def list_all(self) -> list[Lesson]:
        return self.find({})

    def find(self, query: dict[str, Any]) -> list[Lesson]:
        with store_errors("find lessons"):
            return [self._to_domain(raw) for raw in self._collection.find(query)]

    def get_by_id(self, lesson_id: LessonId) -> Lesson | None:
        with store_errors("get lesson"):
            raw = self._collection.find_one({"_id": ObjectId(lesson_id.value)})
        return self._to_domain(raw) if raw is not None else None

    def apply_patch(self, lesson_id: LessonId, patch: LessonPatch) -> UpdateResult:
        fields = {
            name: _encode_price(value) if name == "price" else value
            for name, value in patch.fields.items()
        }
        with store_errors("update lesson"):
            result = self._collection.update_one(
                {"_id": ObjectId(lesson_id.value)},
                {"$set": fields},
            )
        return UpdateResult(
            matched=result.matched_count > 0,
            modified=result.modified_count > 0,
        )

    def reserve_spaces(self, lesson_id: LessonId, quantity: int) -> bool:
        with store_errors("reserve spaces"):
            result = self._collection.update_one(
                {"_id": ObjectId(lesson_id.value), "spaces": {"$gte": quantity}},
                {"$inc": {"spaces": -quantity}},
            )
        return result.modified_count == 1

    def release_spaces(self, lesson_id: LessonId, quantity: int) -> None:
        with store_errors("release spaces"):
            self._collection.update_one(
                {"_id": ObjectId(lesson_id.value)},
                {"$inc": {"spaces": quantity}},
            )

    def add(self, lesson: Lesson) -> None:
        with store_errors("insert lesson"):
            self._collection.insert_one(self._to_raw(lesson))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(lesson: Lesson) -> dict[str, Any]:
        return {
            "_id": ObjectId(lesson.id.value),
            "subject": lesson.subject,
            "location": lesson.location,
            "instructor": lesson.instructor,
            "description": lesson.description,
            "schedule": lesson.schedule,
            "image": lesson.image,
            "price": _encode_price(lesson.price),
            "spaces": lesson.spaces,
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Lesson:
        return Lesson(
            id=LessonId(str(raw["_id"])),
            subject=raw.get("subject", ""),
            location=raw.get("location", ""),
            instructor=raw.get("instructor", ""),
            description=raw.get("description", ""),
            schedule=raw.get("schedule", ""),
            image=raw.get("image"),
            price=_decode_price(raw.get("price", 0)),
            spaces=int(raw.get("spaces", 0)),
        )


def _encode_price(price: Money) -> Decimal128:
    return Decimal128(price.amount)


def _decode_price(value: Any) -> Money:
    # Seeded catalogs may hold plain JSON numbers rather than Decimal128.
    if isinstance(value, Decimal128):
        return Money(value.to_decimal())
    if isinstance(value, Decimal):
        return Money(value)
    return Money.of(value)
