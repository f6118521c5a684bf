from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from checkin_service.env import StorageEnv, get_env
from checkin_service.models import (
    ApiResponse,
    Attendee,
    AttendeeCreate,
    AttendeeUpdate,
    BulkAttendeeRequest,
    ok,
)
from checkin_service.routers.deps import ensure_seeded, require_id
from checkin_service.services import AttendeeService

router = APIRouter(prefix="/api/attendees", tags=["attendees"], dependencies=[Depends(ensure_seeded)])
svc = AttendeeService()


@router.get("", response_model=ApiResponse[List[Attendee]], response_model_exclude_none=True)
async def search_attendees(
    room_number: Optional[str] = Query(default=None, alias="roomNumber"),
    seminar_id: Optional[str] = Query(default=None, alias="seminarId"),
    env: StorageEnv = Depends(get_env),
):
    return ok(await svc.search(env, room_number=room_number, seminar_id=seminar_id))


@router.post("", response_model=ApiResponse[Attendee], response_model_exclude_none=True)
async def create_attendee(payload: AttendeeCreate, env: StorageEnv = Depends(get_env)):
    return ok(await svc.create(env, payload))


@router.post("/bulk", response_model=ApiResponse[List[Attendee]], response_model_exclude_none=True)
async def bulk_create_attendees(payload: BulkAttendeeRequest, env: StorageEnv = Depends(get_env)):
    return ok(await svc.bulk_create(env, payload))


@router.put("/{attendee_id}", response_model=ApiResponse[Attendee], response_model_exclude_none=True)
async def update_attendee(attendee_id: str, patch: AttendeeUpdate, env: StorageEnv = Depends(get_env)):
    return ok(await svc.update(env, require_id(attendee_id), patch))


@router.delete("/{attendee_id}", response_model=ApiResponse[Dict[str, str]], response_model_exclude_none=True)
async def delete_attendee(attendee_id: str, env: StorageEnv = Depends(get_env)):
    await svc.delete(env, require_id(attendee_id))
    return ok({"id": attendee_id})


@router.post("/{attendee_id}/checkin", response_model=ApiResponse[Attendee], response_model_exclude_none=True)
async def check_in_attendee(attendee_id: str, env: StorageEnv = Depends(get_env)):
    return ok(await svc.check_in(env, require_id(attendee_id, "attendee ID")))
