"""Module: response."""

import logging
from decimal import Decimal
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shifolink.core.errors import AppError

logger = logging.getLogger(__name__)


def describe(status_code: int) -> str:
    if status_code < 400:
        return "succes"
    if status_code < 500:
        return "bad request"
    return "internal server error"


# Uniform envelope used by every endpoint, success or failure.
def handle_response(status_code: int, data: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {
                "status_code": status_code,
                "description": describe(status_code),
                "data": data,
            },
            custom_encoder={Decimal: str},
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return handle_response(exc.status_code, exc.message)

    # Malformed JSON bodies and typed params are client errors, not 422s.
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Drop the echoed input: it can hold the whole body, passwords included.
        errors = [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]
        return handle_response(400, errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return handle_response(exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return handle_response(500, f"Internal server error: {exc}")
