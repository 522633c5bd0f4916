"""Application service: Seed Catalog use case."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from lessonshop.domain.model.lesson import Lesson
from lessonshop.domain.model.value_objects import LessonId, Money
from lessonshop.domain.repository.lesson_repository import LessonRepository

logger = logging.getLogger(__name__)


class SeedCatalogHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self, entries: Iterable[Mapping[str, Any]]) -> int:
        """Insert *entries* as new lessons when the catalog is empty.

        Returns the number of lessons inserted (0 if the catalog already
        had lessons).
        """
        if self._lesson_repo.list_all():
            logger.info("Catalog already seeded, skipping")
            return 0

        count = 0
        for entry in entries:
            self._lesson_repo.add(
                Lesson(
                    id=LessonId.generate(),
                    subject=entry["subject"],
                    location=entry["location"],
                    price=Money.of(entry["price"]),
                    spaces=int(entry["spaces"]),
                    instructor=entry.get("instructor", ""),
                    description=entry.get("description", ""),
                    schedule=entry.get("schedule", ""),
                    image=entry.get("image"),
                )
            )
            count += 1
        logger.info("Seeded %d lessons", count)
        return count
