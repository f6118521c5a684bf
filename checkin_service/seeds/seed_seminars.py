from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import List

from checkin_service.models import Seminar


def _at(day: date) -> str:
    return datetime.combine(day, time(9, 0), tzinfo=timezone.utc).isoformat()


def demo_seminars(today: date) -> List[Seminar]:
    """
    Demo seminars placed around `today`: one running, one starting today,
    one next week.
    """
    return [
        Seminar(
            id="seminar-1",
            name="Cloudflare Connect 2024",
            organizer="Cloudflare Inc.",
            start_date=_at(today - timedelta(days=1)),
            end_date=_at(today + timedelta(days=2)),
            room="Grand Ballroom",
        ),
        Seminar(
            id="seminar-2",
            name="Future of AI Summit",
            organizer="Tech Innovators",
            start_date=_at(today),
            end_date=_at(today + timedelta(days=1)),
            room="Neptune",
        ),
        Seminar(
            id="seminar-3",
            name="Digital Marketing World",
            organizer="Marketing Pro",
            start_date=_at(today + timedelta(days=5)),
            end_date=_at(today + timedelta(days=7)),
            room="Orion",
        ),
    ]
