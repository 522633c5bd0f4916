"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pymongo import MongoClient
from pymongo.database import Database

from lessonshop.infrastructure.config import Settings
from lessonshop.infrastructure.persistence.mongo_lesson_repository import (
    MongoLessonRepository,
)
from lessonshop.infrastructure.persistence.mongo_order_repository import (
    MongoOrderRepository,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def database() -> Database:
    # One client per process; it owns the connection pool.
    cfg = settings()
    client: MongoClient = MongoClient(
        cfg.mongodb_uri,
        serverSelectionTimeoutMS=cfg.mongo_timeout_ms,
        tz_aware=True,
    )
    logger.info("Using MongoDB database '%s'", cfg.db_name)
    return client[cfg.db_name]


def lesson_repository() -> MongoLessonRepository:
    return MongoLessonRepository(database())


def order_repository() -> MongoOrderRepository:
    return MongoOrderRepository(database())


def application():
    """Build the HTTP application over the configured store."""
    from lessonshop.infrastructure.api.app import create_app

    return create_app(
        lesson_repo=lesson_repository(),
        order_repo=order_repository(),
        settings=settings(),
    )
