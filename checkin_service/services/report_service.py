from __future__ import annotations

from datetime import date
from typing import Optional

from checkin_service.dal.attendee_dal import attendee_store, list_for_seminar
from checkin_service.dal.seminar_dal import seminar_store
from checkin_service.env import StorageEnv
from checkin_service.errors import NotFoundError
from checkin_service.models import BreakfastReport, DashboardSummary, ReportRow


class ReportService:
    """Read-only views over seminars and rosters for the front desk and organizers."""

    async def breakfast_report(self, env: StorageEnv, seminar_id: str, day: date) -> BreakfastReport:
        if not await seminar_store.exists(env, seminar_id):
            raise NotFoundError("Seminar not found")
        seminar = await seminar_store.get_state(env, seminar_id)
        key = day.isoformat()

        rows = [
            ReportRow(
                full_name=a.full_name,
                room_number=a.room_number,
                status="Served" if a.served_on(key) else "Pending",
            )
            for a in await list_for_seminar(env, seminar_id)
        ]
        served = sum(1 for r in rows if r.status == "Served")
        return BreakfastReport(
            seminar_id=seminar.id,
            seminar_name=seminar.name,
            date=key,
            rows=rows,
            served=served,
            pending=len(rows) - served,
        )

    async def dashboard(self, env: StorageEnv, day: Optional[date] = None, seminar_id: Optional[str] = None) -> DashboardSummary:
        key = (day or env.today()).isoformat()
        attendees = await attendee_store.list(env)
        if seminar_id:
            attendees = [a for a in attendees if a.seminar_id == seminar_id]
        served = [a for a in attendees if a.served_on(key)]
        pending = [a for a in attendees if not a.served_on(key)]
        return DashboardSummary(
            date=key,
            seminar_id=seminar_id,
            served=served,
            pending=pending,
            served_count=len(served),
            pending_count=len(pending),
        )
