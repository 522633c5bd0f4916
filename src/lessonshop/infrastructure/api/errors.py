"""Mapping of domain errors to HTTP responses.

Handlers never expose internal error details: store failures are
reported with a fixed message.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lessonshop.domain.exceptions import (
    DomainException,
    InsufficientCapacity,
    InvalidCapacity,
    InvalidIdentifier,
    InvalidPayload,
    LessonNotFound,
    NotFound,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    InvalidPayload.code: 400,
    InvalidIdentifier.code: 400,
    InvalidCapacity.code: 400,
    NotFound.code: 404,
    LessonNotFound.code: 404,
    InsufficientCapacity.code: 409,
    StoreUnavailable.code: 500,
}


def _error_response(status: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": code, "message": message})


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status = STATUS_BY_CODE.get(exc.code, 500)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _error_response(status, exc.code, "The service is temporarily unavailable")
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return _error_response(status, exc.code, str(exc))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return _error_response(400, InvalidPayload.code, message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
