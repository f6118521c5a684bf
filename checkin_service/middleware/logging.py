# checkin_service/middleware/logging.py
from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response

logger = logging.getLogger("checkin_service.access")

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")


def install_request_logging(app: FastAPI) -> None:
    """
    One access line per request: `<rid> METHOD PATH -> STATUS (ms)`.
    The request id is taken from X-Request-ID when the caller sends one and
    echoed back on the response.
    """

    @app.middleware("http")
    async def _log_requests(request: Request, call_next: Callable):
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = rid
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - started) * 1000.0
            logger.exception("%s %s %s failed after %.1f ms", rid, request.method, request.url.path, elapsed)
            raise

        elapsed = (time.perf_counter() - started) * 1000.0
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, "%s %s %s -> %s (%.1f ms)", rid, request.method, request.url.path, response.status_code, elapsed)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
