"""Application service: Update Lesson use case.

Administrators adjust catalog attributes (most often remaining spaces).
The change is one atomic single-document write; it never touches
existing orders, which captured their price snapshot at creation time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lessonshop.application.dto import LessonUpdateDTO
from lessonshop.domain.exceptions import NotFound
from lessonshop.domain.model.lesson import LessonPatch
from lessonshop.domain.model.value_objects import LessonId
from lessonshop.domain.repository.lesson_repository import LessonRepository

logger = logging.getLogger(__name__)


class UpdateLessonHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self, lesson_id: str, patch: Mapping[str, Any]) -> LessonUpdateDTO:
        """Apply a partial update to one lesson.

        Raises:
            InvalidIdentifier: If *lesson_id* is malformed.
            InvalidPayload: If *patch* names a non-updatable field or has a bad value.
            InvalidCapacity: If ``spaces`` is negative or not an integer.
            NotFound: If no lesson has this ID.
        """
        lid = LessonId.parse(lesson_id)
        parsed = LessonPatch.parse(patch)

        result = self._lesson_repo.apply_patch(lid, parsed)
        if not result.matched:
            raise NotFound(f"Lesson with ID '{lid}' not found")

        logger.info("Updated lesson %s fields=%s", lid, sorted(parsed.fields))
        return LessonUpdateDTO(matched=result.matched, modified=result.modified)
