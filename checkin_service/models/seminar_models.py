from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .common import NonBlankStr


def _aware(value: datetime) -> datetime:
    # naive timestamps are read as UTC so mixed inputs stay comparable
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _parse_iso(value: str) -> datetime:
    return _aware(datetime.fromisoformat(value))


# ─────────────────────────────────────────────────────────────
# Stored record
# ─────────────────────────────────────────────────────────────
class Seminar(BaseModel):
    """
    Seminar as persisted under "seminar:<id>".
    Dates are ISO 8601 strings; the zero value leaves every field empty.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    name: str = ""
    organizer: str = ""
    start_date: str = Field(default="", description="ISO 8601 start timestamp")
    end_date: str = Field(default="", description="ISO 8601 end timestamp")
    room: str = ""

    @model_validator(mode="after")
    def _end_not_before_start(self):
        if self.start_date and self.end_date:
            try:
                start, end = _parse_iso(self.start_date), _parse_iso(self.end_date)
            except ValueError:
                raise ValueError("startDate and endDate must be ISO 8601 timestamps.")
            if end < start:
                raise ValueError("End date cannot be before start date.")
        return self


# ─────────────────────────────────────────────────────────────
# Request bodies
# ─────────────────────────────────────────────────────────────
class SeminarCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: NonBlankStr
    organizer: NonBlankStr
    start_date: datetime
    end_date: datetime
    room: NonBlankStr

    @model_validator(mode="after")
    def _end_not_before_start(self):
        if _aware(self.end_date) < _aware(self.start_date):
            raise ValueError("End date cannot be before start date.")
        return self

    def to_record(self, seminar_id: str) -> Seminar:
        return Seminar(
            id=seminar_id,
            name=self.name,
            organizer=self.organizer,
            start_date=self.start_date.isoformat(),
            end_date=self.end_date.isoformat(),
            room=self.room,
        )


class SeminarUpdate(BaseModel):
    """Only the fields present in the request body are patched."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[NonBlankStr] = None
    organizer: Optional[NonBlankStr] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    room: Optional[NonBlankStr] = None

    def to_patch(self) -> dict:
        fields = self.model_dump(exclude_unset=True, exclude_none=True)
        for k in ("start_date", "end_date"):
            if k in fields:
                fields[k] = fields[k].isoformat()
        return fields
