"""Unit tests for catalog search query construction."""

import re

import pytest

from lessonshop.domain.model.lesson import SEARCHABLE_FIELDS
from lessonshop.domain.service.catalog_search import build_search_query, normalize_term


class TestNormalizeTerm:

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
    def test_blank_becomes_empty(self, raw):
        assert normalize_term(raw) == ""

    def test_trims(self):
        assert normalize_term("  math ") == "math"


class TestBuildSearchQuery:

    def test_covers_every_searchable_field(self):
        query = build_search_query("math")
        fields = [next(iter(clause)) for clause in query["$or"]]
        assert fields == list(SEARCHABLE_FIELDS)

    def test_case_insensitive(self):
        query = build_search_query("math")
        for clause in query["$or"]:
            (condition,) = clause.values()
            assert condition == {"$regex": "math", "$options": "i"}

    def test_metacharacters_escaped(self):
        query = build_search_query("c++ (a.*)")
        pattern = query["$or"][0]["subject"]["$regex"]
        assert re.search(pattern, "learn c++ (a.*) now")
        assert not re.search(pattern, "c (abc)")

    def test_empty_term_rejected(self):
        with pytest.raises(ValueError):
            build_search_query("")
