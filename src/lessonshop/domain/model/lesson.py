"""Lesson aggregate and the allow-listed patch applied to it.

Lessons live independently of orders. Prices change and capacity is
consumed, but an order keeps the price snapshot it was placed with.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from lessonshop.domain.exceptions import InvalidCapacity, InvalidPayload
from lessonshop.domain.model.value_objects import MAX_INT64, LessonId, Money

SEARCHABLE_FIELDS = ("subject", "location", "instructor", "description", "schedule")
TEXT_FIELDS = SEARCHABLE_FIELDS + ("image",)
IDENTITY_FIELDS = ("id", "_id")


@dataclass
class Lesson:
    """A bookable lesson in the catalog.

    Invariant: ``spaces`` is never negative.
    """

    id: LessonId
    subject: str
    location: str
    price: Money
    spaces: int
    instructor: str = ""
    description: str = ""
    schedule: str = ""
    image: str | None = None

    def __post_init__(self) -> None:
        if self.spaces < 0:
            raise InvalidCapacity(
                f"Lesson {self.id} cannot have negative spaces ({self.spaces})"
            )


@dataclass(frozen=True)
class LessonPatch:
    """A validated partial update for a lesson.

    Only allow-listed attributes can be changed. The identity is never
    part of a patch: ``id`` and ``_id`` keys are silently dropped.
    """

    fields: dict[str, Any]

    @classmethod
    def parse(cls, raw: Mapping[str, Any]) -> LessonPatch:
        if not isinstance(raw, Mapping):
            raise InvalidPayload("Lesson update must be a JSON object")

        fields: dict[str, Any] = {}
        for name, value in raw.items():
            if name in IDENTITY_FIELDS:
                continue
            if name in TEXT_FIELDS:
                fields[name] = _parse_text(name, value)
            elif name == "price":
                fields[name] = _parse_price(value)
            elif name == "spaces":
                fields[name] = _parse_spaces(value)
            else:
                raise InvalidPayload(f"Field '{name}' cannot be updated")

        if not fields:
            raise InvalidPayload("Lesson update contains no updatable fields")
        return cls(fields)

    @property
    def spaces(self) -> int | None:
        return self.fields.get("spaces")


def _parse_text(name: str, value: Any) -> str | None:
    if name == "image" and value is None:
        return None
    if not isinstance(value, str):
        raise InvalidPayload(f"Field '{name}' must be a string")
    return value


def _parse_price(value: Any) -> Money:
    if not isinstance(value, (int, float, str)):
        raise InvalidPayload("Field 'price' must be a number")
    return Money.of(value)


def _parse_spaces(value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidCapacity("Field 'spaces' must be an integer")
    if value < 0:
        raise InvalidCapacity(f"Spaces cannot be negative, got {value}")
    if value > MAX_INT64:
        raise InvalidCapacity(f"Spaces cannot exceed {MAX_INT64}")
    return value
