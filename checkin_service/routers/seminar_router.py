from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from checkin_service.env import StorageEnv, get_env
from checkin_service.models import (
    ApiResponse,
    Attendee,
    BreakfastReport,
    Seminar,
    SeminarCreate,
    SeminarUpdate,
    ok,
)
from checkin_service.routers.deps import ensure_seeded, require_id
from checkin_service.services import AttendeeService, ReportService, SeminarService

router = APIRouter(prefix="/api/seminars", tags=["seminars"], dependencies=[Depends(ensure_seeded)])
svc = SeminarService()
attendees = AttendeeService()
reports = ReportService()


@router.get("", response_model=ApiResponse[List[Seminar]], response_model_exclude_none=True)
async def list_seminars(env: StorageEnv = Depends(get_env)):
    return ok(await svc.list(env))


@router.post("", response_model=ApiResponse[Seminar], response_model_exclude_none=True)
async def create_seminar(payload: SeminarCreate, env: StorageEnv = Depends(get_env)):
    return ok(await svc.create(env, payload))


@router.get("/{seminar_id}", response_model=ApiResponse[Seminar], response_model_exclude_none=True)
async def get_seminar(seminar_id: str, env: StorageEnv = Depends(get_env)):
    return ok(await svc.get(env, require_id(seminar_id)))


@router.put("/{seminar_id}", response_model=ApiResponse[Seminar], response_model_exclude_none=True)
async def update_seminar(seminar_id: str, patch: SeminarUpdate, env: StorageEnv = Depends(get_env)):
    return ok(await svc.update(env, require_id(seminar_id), patch))


@router.delete("/{seminar_id}", response_model=ApiResponse[Dict[str, str]], response_model_exclude_none=True)
async def delete_seminar(seminar_id: str, env: StorageEnv = Depends(get_env)):
    await svc.delete(env, require_id(seminar_id))
    return ok({"id": seminar_id})


@router.get("/{seminar_id}/attendees", response_model=ApiResponse[List[Attendee]], response_model_exclude_none=True)
async def list_seminar_attendees(seminar_id: str, env: StorageEnv = Depends(get_env)):
    return ok(await attendees.list_for_seminar(env, require_id(seminar_id, "seminar ID")))


@router.get("/{seminar_id}/report", response_model=ApiResponse[BreakfastReport], response_model_exclude_none=True)
async def seminar_report(
    seminar_id: str,
    day: Optional[date] = Query(default=None, alias="date", description="YYYY-MM-DD, defaults to today"),
    env: StorageEnv = Depends(get_env),
):
    return ok(await reports.breakfast_report(env, require_id(seminar_id, "seminar ID"), day or env.today()))
