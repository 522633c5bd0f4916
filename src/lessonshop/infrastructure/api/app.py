"""FastAPI application factory."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from lessonshop.domain.repository.lesson_repository import LessonRepository
from lessonshop.domain.repository.order_repository import OrderRepository
from lessonshop.infrastructure.api.errors import register_error_handlers
from lessonshop.infrastructure.api.routes import router
from lessonshop.infrastructure.config import Settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
_METHODS_WITH_BODY = ("POST", "PUT", "PATCH")


def create_app(
    lesson_repo: LessonRepository,
    order_repo: OrderRepository,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="Lesson Shop API", version="1.0.0")
    app.state.lesson_repo = lesson_repo
    app.state.order_repo = order_repo

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        body_info = ""
        if request.method in _METHODS_WITH_BODY:
            raw = await request.body()
            try:
                body_info = f" - Body: {json.dumps(json.loads(raw))}" if raw else ""
            except ValueError:
                body_info = f" - Body: <{len(raw)} bytes, not JSON>"
        logger.info("%s %s%s", request.method, request.url.path, body_info)
        return await call_next(request)

    register_error_handlers(app)
    app.include_router(router, prefix=API_PREFIX)

    image_dir = Path(settings.image_dir)
    if image_dir.is_dir():
        app.mount("/image", StaticFiles(directory=image_dir), name="image")
    else:
        logger.info("Image directory '%s' not found, not serving images", image_dir)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Backend is running and ready!"

    return app
