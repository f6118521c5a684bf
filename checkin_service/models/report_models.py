from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .attendee_models import Attendee

BreakfastState = Literal["Served", "Pending"]


class ReportRow(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str
    room_number: str
    status: BreakfastState


class BreakfastReport(BaseModel):
    """
    Breakfast attendance for one seminar on one day, in roster order.
    Rendering (PDF, spreadsheet, print) is left to the client.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    seminar_id: str
    seminar_name: str
    date: str = Field(..., description="YYYY-MM-DD")
    rows: List[ReportRow] = Field(default_factory=list)
    served: int = 0
    pending: int = 0


class DashboardSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: str
    seminar_id: Optional[str] = None
    served: List[Attendee] = Field(default_factory=list)
    pending: List[Attendee] = Field(default_factory=list)
    served_count: int = 0
    pending_count: int = 0
