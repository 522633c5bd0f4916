"""Application service: Search Lessons use case."""

from __future__ import annotations

from lessonshop.application.dto import LessonDTO
from lessonshop.domain.repository.lesson_repository import LessonRepository
from lessonshop.domain.service.catalog_search import build_search_query, normalize_term


class SearchLessonsHandler:

    def __init__(self, lesson_repo: LessonRepository) -> None:
        self._lesson_repo = lesson_repo

    def handle(self, term: str | None) -> list[LessonDTO]:
        """Return lessons with *term* in any searchable field.

        A blank term means "no query": the result is empty and the
        store is not consulted.
        """
        term = normalize_term(term)
        if not term:
            return []
        lessons = self._lesson_repo.find(build_search_query(term))
        return [LessonDTO.from_lesson(lesson) for lesson in lessons]
