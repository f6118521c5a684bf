from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from checkin_service.config import settings
from checkin_service.env import StorageEnv, get_env

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    deep: bool = Query(False, description="Ping the key-value store"),
    env: StorageEnv = Depends(get_env),
) -> Dict[str, Any]:
    status = "ok"
    details: Dict[str, Any] = {"service": settings.service_name}

    if not deep:
        return {"status": status, "details": details}

    try:
        await env.kv.ping()
        details["kv"] = "ok"
    except Exception as e:
        status = "degraded"
        details["kv"] = f"error: {e!r}"

    return {"status": status, "details": details}
