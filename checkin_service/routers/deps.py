from __future__ import annotations

from fastapi import Depends

from checkin_service.env import StorageEnv, get_env
from checkin_service.errors import RecordValidationError
from checkin_service.seeds.bootstrap import run_all_seeds


async def ensure_seeded(env: StorageEnv = Depends(get_env)) -> None:
    """Runs ahead of every /api route; a single read once the indexes exist."""
    await run_all_seeds(env)


def require_id(value: str, what: str = "ID") -> str:
    if not value or not value.strip():
        raise RecordValidationError(f"Invalid {what}")
    return value
