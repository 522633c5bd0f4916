"""Abstract repository for the Lesson aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Every capacity change goes through a single-document
conditional update; implementations must never emulate it with a read
followed by a write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from lessonshop.domain.model.lesson import Lesson, LessonPatch
from lessonshop.domain.model.value_objects import LessonId


@dataclass(frozen=True)
class UpdateResult:
    matched: bool
    modified: bool


class LessonRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Lesson]:
        """Return every lesson in store order."""

    @abstractmethod
    def find(self, query: dict[str, Any]) -> list[Lesson]:
        """Return the lessons matching a document filter, in store order."""

    @abstractmethod
    def get_by_id(self, lesson_id: LessonId) -> Lesson | None:
        """Return a lesson by its ID, or None if not found."""

    @abstractmethod
    def apply_patch(self, lesson_id: LessonId, patch: LessonPatch) -> UpdateResult:
        """Atomically set the patched fields on one lesson."""

    @abstractmethod
    def reserve_spaces(self, lesson_id: LessonId, quantity: int) -> bool:
        """Decrement ``spaces`` by *quantity* only if ``spaces >= quantity``.

        Returns False when the condition does not hold (or the lesson is
        gone); the check and the write are one atomic store operation.
        """

    @abstractmethod
    def release_spaces(self, lesson_id: LessonId, quantity: int) -> None:
        """Give back *quantity* previously reserved spaces."""

    @abstractmethod
    def add(self, lesson: Lesson) -> None:
        """Insert a new lesson."""
