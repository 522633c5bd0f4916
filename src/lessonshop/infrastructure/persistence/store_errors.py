"""Translation of driver failures into the domain's StoreUnavailable."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from pymongo.errors import PyMongoError

from lessonshop.domain.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as exc:
        logger.error("Store operation '%s' failed: %s", operation, exc)
        raise StoreUnavailable(f"Store operation '{operation}' failed") from exc
