# checkin_service/events/schemas.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class EventEnvelope(BaseModel):
    """
    Minimal envelope shared across events.
    """
    event: str = Field(..., description="Unversioned event name, e.g., seminar.created, attendee.checked_in.")
    service: str = Field(default="checkin")
    org: str = Field(..., description="Tenant/org segment used in routing key.")
    version: str = Field(default="v1", description="Version suffix for RK.")
    at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    payload: Dict[str, Any] = Field(default_factory=dict)


# Thin, explicit payloads for each domain
class SeminarEvent(BaseModel):
    id: str
    name: Optional[str] = None
    attendees_removed: Optional[int] = None


class AttendeeEvent(BaseModel):
    id: str
    seminar_id: Optional[str] = None
    room_number: Optional[str] = None


class CheckinEvent(BaseModel):
    attendee_id: str
    seminar_id: str
    date: str
