from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .common import NonBlankStr, validate_date_key


# ─────────────────────────────────────────────────────────────
# Stored record
# ─────────────────────────────────────────────────────────────
class Attendee(BaseModel):
    """
    Attendee as persisted under "attendee:<id>".

    seminar_id is a weak reference: nothing at the storage layer checks it,
    only the seminar cascade delete keeps rosters clean.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    seminar_id: str = ""
    full_name: str = ""
    room_number: str = ""
    # YYYY-MM-DD -> breakfast taken
    breakfast_status: Dict[str, bool] = Field(default_factory=dict)

    @field_validator("breakfast_status")
    @classmethod
    def _date_keys(cls, v: Dict[str, bool]) -> Dict[str, bool]:
        for k in v:
            validate_date_key(k)
        return v

    def served_on(self, date_key: str) -> bool:
        return bool(self.breakfast_status.get(date_key))


# ─────────────────────────────────────────────────────────────
# Request bodies
# ─────────────────────────────────────────────────────────────
class AttendeeCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    seminar_id: NonBlankStr
    full_name: NonBlankStr
    room_number: NonBlankStr

    @field_validator("room_number", mode="before")
    @classmethod
    def _room_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v


class AttendeeUpdate(BaseModel):
    """Only fullName and roomNumber are editable; seminar moves are not supported."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: Optional[NonBlankStr] = None
    room_number: Optional[NonBlankStr] = None

    @field_validator("room_number", mode="before")
    @classmethod
    def _room_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class BulkAttendee(BaseModel):
    """One roster row from an uploaded list; room numbers may arrive as numbers."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: NonBlankStr
    room_number: NonBlankStr

    @field_validator("room_number", mode="before")
    @classmethod
    def _room_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v


class BulkAttendeeRequest(BaseModel):
    # Rows stay raw here; each one is validated on its own and bad rows are skipped
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    seminar_id: NonBlankStr
    attendees: List[Any]
