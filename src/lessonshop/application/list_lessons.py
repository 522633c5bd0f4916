"""Application service: List Lessons use case."""

from __future__ import annotations

from lessonshop.application.dto import LessonDTO
from lessonshop.domain.repository.lesson_repository import LessonRepository


class ListLessonsHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self) -> list[LessonDTO]:
        return [LessonDTO.from_lesson(lesson) for lesson in self._lesson_repo.list_all()]
