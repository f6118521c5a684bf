from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from checkin_service.env import StorageEnv, get_env
from checkin_service.models import ApiResponse, DashboardSummary, ok
from checkin_service.routers.deps import ensure_seeded
from checkin_service.services import ReportService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"], dependencies=[Depends(ensure_seeded)])
reports = ReportService()


@router.get("", response_model=ApiResponse[DashboardSummary], response_model_exclude_none=True)
async def dashboard(
    day: Optional[date] = Query(default=None, alias="date"),
    seminar_id: Optional[str] = Query(default=None, alias="seminarId"),
    env: StorageEnv = Depends(get_env),
):
    return ok(await reports.dashboard(env, day, seminar_id))
