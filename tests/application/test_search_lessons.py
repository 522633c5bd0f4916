"""Integration tests for the ListLessons and SearchLessons use cases."""

import pytest

from lessonshop.application.list_lessons import ListLessonsHandler
from lessonshop.application.search_lessons import SearchLessonsHandler
from lessonshop.domain.exceptions import StoreUnavailable
from tests.fakes import FakeLessonRepository, make_lesson


def _catalog():
    return [
        make_lesson("Mathematics", location="Hendon"),
        make_lesson("Chess", description="basic math skills"),
        make_lesson("Football", location="Gym"),
    ]


class TestSearchLessons:

    def test_matches_any_field_case_insensitively(self):
        lessons = _catalog()
        handler = SearchLessonsHandler(FakeLessonRepository(lessons))

        results = handler.handle("math")

        assert [r.id for r in results] == [lessons[0].id.value, lessons[1].id.value]

    def test_matches_instructor_and_schedule(self):
        lesson = make_lesson("Art", instructor="Ms. Duarte", schedule="Fridays 16:00")
        handler = SearchLessonsHandler(FakeLessonRepository([lesson, *_catalog()]))

        assert [r.subject for r in handler.handle("duarte")] == ["Art"]
        assert [r.subject for r in handler.handle("FRIDAYS")] == ["Art"]

    @pytest.mark.parametrize("term", ["", "   ", None])
    def test_blank_term_skips_store(self, term):
        repo = FakeLessonRepository(_catalog())
        handler = SearchLessonsHandler(repo)

        assert handler.handle(term) == []
        assert repo.calls == []

    def test_term_is_trimmed(self):
        repo = FakeLessonRepository(_catalog())
        results = SearchLessonsHandler(repo).handle("  gym  ")
        assert [r.subject for r in results] == ["Football"]

    def test_metacharacters_match_literally(self):
        lesson = make_lesson("C++ (intro)")
        repo = FakeLessonRepository([lesson, *_catalog()])
        handler = SearchLessonsHandler(repo)

        assert [r.subject for r in handler.handle("c++ (")] == ["C++ (intro)"]
        assert handler.handle(".*") == []

    def test_identity_rendered_as_string(self):
        lessons = _catalog()
        results = SearchLessonsHandler(FakeLessonRepository(lessons)).handle("gym")
        assert results[0].id == lessons[2].id.value
        assert isinstance(results[0].id, str)

    def test_store_failure_propagates(self):
        repo = FakeLessonRepository(_catalog())
        repo.unavailable = True
        with pytest.raises(StoreUnavailable):
            SearchLessonsHandler(repo).handle("math")


class TestListLessons:

    def test_lists_all_in_store_order(self):
        lessons = _catalog()
        results = ListLessonsHandler(FakeLessonRepository(lessons)).handle()
        assert [r.subject for r in results] == ["Mathematics", "Chess", "Football"]
        assert results[0].price == 100.0
