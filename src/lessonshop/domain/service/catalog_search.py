"""Domain service: Catalog Search.

Turns free text into a case-insensitive substring filter over every
searchable lesson field. Regular-expression metacharacters in the input
are escaped, so the term always matches literally.
"""

from __future__ import annotations

import re
from typing import Any

from lessonshop.domain.model.lesson import SEARCHABLE_FIELDS


def normalize_term(term: str | None) -> str:
    return (term or "").strip()


def build_search_query(term: str) -> dict[str, Any]:
    """Build an ``$or`` filter matching *term* in any searchable field.

    *term* must already be normalized and non-empty.
    """
    if not term:
        raise ValueError("search term must not be empty")
    pattern = re.escape(term)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in SEARCHABLE_FIELDS
        ]
    }
