from __future__ import annotations

from datetime import date, timedelta
from typing import List

from checkin_service.models import Attendee


def demo_attendees(today: date) -> List[Attendee]:
    """
    Four attendees on seminar-1 (breakfast history for yesterday and today)
    and four on seminar-2 (today only). seminar-3 starts empty.
    """
    t = today.isoformat()
    y = (today - timedelta(days=1)).isoformat()

    rows = [
        # seminar-1
        ("attendee-101", "seminar-1", "John Doe", "101", {y: True, t: True}),
        ("attendee-102", "seminar-1", "Jane Smith", "102", {y: True, t: False}),
        ("attendee-103", "seminar-1", "Peter Jones", "103", {y: True, t: True}),
        ("attendee-104", "seminar-1", "Mary Williams", "104", {y: True, t: False}),
        # seminar-2
        ("attendee-201", "seminar-2", "KOFFI Jean", "305", {t: True}),
        ("attendee-202", "seminar-2", "David Brown", "306", {t: False}),
        ("attendee-203", "seminar-2", "Susan Garcia", "307", {t: False}),
        ("attendee-204", "seminar-2", "Michael Miller", "308", {t: True}),
    ]
    return [
        Attendee(
            id=aid,
            seminar_id=sid,
            full_name=name,
            room_number=room,
            breakfast_status=status,
        )
        for aid, sid, name, room, status in rows
    ]
