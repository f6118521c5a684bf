from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from fastapi import Request

from checkin_service.config import Settings
from checkin_service.kv import KVStore, MemoryKVStore, MongoKVStore

logger = logging.getLogger("checkin_service.env")


def _today_in(tz_name: str) -> Callable[[], date]:
    tz = ZoneInfo(tz_name)

    def _today() -> date:
        return datetime.now(tz).date()

    return _today


@dataclass
class StorageEnv:
    """
    Execution context handed to every entity-store call.
    Built once per application and kept on app.state.
    """
    kv: KVStore
    seed_demo_data: bool = True
    strict_index: bool = False
    today: Callable[[], date] = field(default=date.today)


def build_env(settings: Settings) -> StorageEnv:
    backend = settings.kv_backend.lower()
    if backend == "memory":
        kv: KVStore = MemoryKVStore()
    elif backend == "mongo":
        kv = MongoKVStore()
    else:
        raise ValueError(f"Unknown KV_BACKEND '{settings.kv_backend}' (expected 'mongo' or 'memory')")
    logger.info("KV backend: %s", backend)
    return StorageEnv(
        kv=kv,
        seed_demo_data=settings.seed_demo_data,
        strict_index=settings.strict_index,
        today=_today_in(settings.timezone),
    )


def get_env(request: Request) -> StorageEnv:
    """FastAPI dependency: the environment built by the app lifespan."""
    return request.app.state.env
