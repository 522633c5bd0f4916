"""HTTP handlers — handle HTTP concerns only.

Handlers parse requests, call application services and return
response schemas. Domain errors are mapped to responses by the
exception handlers in ``errors``.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request

from lessonshop.application.dto import OrderItemSpec
from lessonshop.application.list_lessons import ListLessonsHandler
from lessonshop.application.place_order import PlaceOrderHandler
from lessonshop.application.search_lessons import SearchLessonsHandler
from lessonshop.application.update_lesson import UpdateLessonHandler
from lessonshop.domain.repository.lesson_repository import LessonRepository
from lessonshop.domain.repository.order_repository import OrderRepository
from lessonshop.infrastructure.api.schemas import (
    ErrorOut,
    LessonOut,
    LessonUpdateOut,
    OrderCreatedOut,
    OrderIn,
)

router = APIRouter()


def _errors(*statuses: int) -> dict[int | str, dict]:
    return {status: {"model": ErrorOut} for status in statuses}


def lesson_repo(request: Request) -> LessonRepository:
    return request.app.state.lesson_repo


def order_repo(request: Request) -> OrderRepository:
    return request.app.state.order_repo


@router.get("/lessons", response_model=list[LessonOut], responses=_errors(500))
def list_lessons(lessons: LessonRepository = Depends(lesson_repo)) -> list[LessonOut]:
    dtos = ListLessonsHandler(lessons).handle()
    return [LessonOut.from_dto(dto) for dto in dtos]


@router.get("/search", response_model=list[LessonOut], responses=_errors(500))
def search_lessons(
    q: str | None = Query(None),
    lessons: LessonRepository = Depends(lesson_repo),
) -> list[LessonOut]:
    dtos = SearchLessonsHandler(lessons).handle(q)
    return [LessonOut.from_dto(dto) for dto in dtos]


@router.post(
    "/orders",
    response_model=OrderCreatedOut,
    status_code=201,
    responses=_errors(400, 404, 409, 500),
)
def place_order(
    payload: OrderIn,
    orders: OrderRepository = Depends(order_repo),
    lessons: LessonRepository = Depends(lesson_repo),
) -> OrderCreatedOut:
    handler = PlaceOrderHandler(order_repo=orders, lesson_repo=lessons)
    dto = handler.handle(
        name=payload.name,
        phone=payload.phone,
        item_specs=[
            OrderItemSpec(lesson_id=item.lessonId, quantity=item.quantity)
            for item in payload.items
        ],
    )
    return OrderCreatedOut(insertedId=dto.id)


@router.put(
    "/lessons/{lesson_id}",
    response_model=LessonUpdateOut,
    responses=_errors(400, 404, 500),
)
def update_lesson(
    lesson_id: str,
    patch: dict[str, Any] = Body(...),
    lessons: LessonRepository = Depends(lesson_repo),
) -> LessonUpdateOut:
    dto = UpdateLessonHandler(lessons).handle(lesson_id, patch)
    return LessonUpdateOut(matched=dto.matched, modified=dto.modified)
