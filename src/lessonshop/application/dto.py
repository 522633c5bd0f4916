"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the API/CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lessonshop.domain.model.lesson import Lesson


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the client asked for (lesson ID + quantity).

    Values are kept raw; the handler validates them.
    """

    lesson_id: Any
    quantity: Any


@dataclass(frozen=True)
class LessonDTO:
    """Output: a lesson with its identity rendered as a plain string."""

    id: str
    subject: str
    location: str
    instructor: str
    description: str
    schedule: str
    image: str | None
    price: float
    spaces: int

    @staticmethod
    def from_lesson(lesson: Lesson) -> LessonDTO:
        return LessonDTO(
            id=str(lesson.id),
            subject=lesson.subject,
            location=lesson.location,
            instructor=lesson.instructor,
            description=lesson.description,
            schedule=lesson.schedule,
            image=lesson.image,
            price=lesson.price.to_float(),
            spaces=lesson.spaces,
        )


@dataclass(frozen=True)
class LessonUpdateDTO:
    matched: bool
    modified: bool


@dataclass(frozen=True)
class OrderPlacedDTO:
    """Output: the committed order's identity and authoritative total."""

    id: str
    total_price: str
    item_count: int
