"""Request and response schemas for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt

from lessonshop.application.dto import LessonDTO


class OrderItemIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lessonId: str
    quantity: StrictInt
    price: float | None = None  # advisory only, never used for pricing


class OrderIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    phone: str
    items: list[OrderItemIn]
    totalPrice: float | None = None  # advisory only, recomputed server side


class LessonOut(BaseModel):
    id: str
    subject: str
    location: str
    instructor: str
    description: str
    schedule: str
    image: str | None = None
    price: float
    spaces: int

    @classmethod
    def from_dto(cls, dto: LessonDTO) -> LessonOut:
        return cls(
            id=dto.id,
            subject=dto.subject,
            location=dto.location,
            instructor=dto.instructor,
            description=dto.description,
            schedule=dto.schedule,
            image=dto.image,
            price=dto.price,
            spaces=dto.spaces,
        )


class OrderCreatedOut(BaseModel):
    insertedId: str


class LessonUpdateOut(BaseModel):
    matched: bool
    modified: bool


class ErrorOut(BaseModel):
    error: str
    message: str
