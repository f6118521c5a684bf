# checkin_service/main.py
from __future__ import annotations

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from checkin_service.config import settings
from checkin_service.db.mongo import close_client
from checkin_service.env import StorageEnv, build_env
from checkin_service.events import get_bus
from checkin_service.logging_conf import setup_logging
from checkin_service.middleware import add_cors, install_request_logging, add_error_handlers
from checkin_service.routers import (
    attendee_router,
    dashboard_router,
    health_router,
    seminar_router,
)

logger = logging.getLogger("checkin_service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Logging first
    setup_logging(os.getenv("LOG_LEVEL"))
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)

    # Storage environment (tests may inject their own before startup)
    if getattr(app.state, "env", None) is None:
        app.state.env = build_env(settings)

    # Connect RabbitMQ (non-fatal if broker is temporarily unavailable)
    try:
        await get_bus().connect()
    except Exception as e:
        logger.warning("RabbitMQ connect failed (will continue without bus): %s", e)

    yield

    # Shutdown
    try:
        await get_bus().close()
    except Exception as e:
        logger.warning("RabbitMQ close failed: %s", e)
    close_client()
    logger.info("Shutdown complete")


def create_app(env: Optional[StorageEnv] = None) -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.env = env

    # Middlewares
    add_cors(app)
    install_request_logging(app)
    add_error_handlers(app)

    # Routers
    app.include_router(health_router)
    app.include_router(seminar_router)
    app.include_router(attendee_router)
    app.include_router(dashboard_router)

    @app.get("/")
    async def root():
        return {
            "service": settings.service_name,
            "name": settings.app_name,
            "status": "ok",
            "docs": "/docs",
            "openapi": "/openapi.json",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    reload_flag = os.getenv("RELOAD", "0") in ("1", "true", "True")
    uvicorn.run(
        "checkin_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload_flag,
        log_level="info",
    )
