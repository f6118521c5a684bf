# checkin_service/middleware/error_handlers.py
from __future__ import annotations
import logging
from typing import Dict, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from checkin_service.errors import (
    DuplicateKeyError,
    EntityError,
    NotFoundError,
    RecordValidationError,
    StorageUnavailableError,
    first_error_message,
)
from checkin_service.middleware.logging import get_request_id
from checkin_service.models import fail

logger = logging.getLogger("checkin_service.errors")

# Most specific first; IndexConsistencyError falls under StorageUnavailableError
STATUS_BY_ERROR: Dict[Type[EntityError], int] = {
    NotFoundError: 404,
    DuplicateKeyError: 409,
    RecordValidationError: 400,
    StorageUnavailableError: 500,
}


def status_for(exc: EntityError) -> int:
    for cls, code in STATUS_BY_ERROR.items():
        if isinstance(exc, cls):
            return code
    return 500


def add_error_handlers(app: FastAPI) -> None:
    """Every failure leaves as {"success": false, "error": <message>}."""

    @app.exception_handler(EntityError)
    async def entity_exception_handler(request: Request, exc: EntityError):
        code = status_for(exc)
        rid = get_request_id(request)
        if code >= 500:
            logger.error("%s %s: %s", rid, type(exc).__name__, exc.message)
        else:
            logger.debug("%s %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(status_code=code, content=fail(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=fail(str(exc.detail)))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_, exc: RequestValidationError):
        logger.debug("Request validation error: %s", exc.errors())
        return JSONResponse(status_code=400, content=fail(first_error_message(exc)))

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(_, exc: ValidationError):
        logger.debug("Validation error: %s", exc)
        return JSONResponse(status_code=400, content=fail(first_error_message(exc)))

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("%s unhandled exception: %s", get_request_id(request), exc)
        return JSONResponse(status_code=500, content=fail("Internal Server Error"))
