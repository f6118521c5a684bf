from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from pydantic import ValidationError

from checkin_service.dal.attendee_dal import (
    attendee_store,
    find_by_room,
    list_for_seminar,
    mark_breakfast_taken,
)
from checkin_service.env import StorageEnv
from checkin_service.errors import NotFoundError
from checkin_service.events import AttendeeEvent, CheckinEvent, RabbitBus, get_bus
from checkin_service.models import (
    Attendee,
    AttendeeCreate,
    AttendeeUpdate,
    BulkAttendee,
    BulkAttendeeRequest,
)

logger = logging.getLogger("checkin_service.services.attendees")


def _new_id() -> str:
    return str(uuid.uuid4())


class AttendeeService:
    def __init__(self, bus: Optional[RabbitBus] = None) -> None:
        self.store = attendee_store
        self._bus = bus

    @property
    def bus(self) -> RabbitBus:
        return self._bus or get_bus()

    async def list_for_seminar(self, env: StorageEnv, seminar_id: str) -> List[Attendee]:
        return await list_for_seminar(env, seminar_id)

    async def search(
        self,
        env: StorageEnv,
        *,
        room_number: Optional[str] = None,
        seminar_id: Optional[str] = None,
    ) -> List[Attendee]:
        """Front-desk lookup by room number, optionally narrowed to one seminar."""
        if room_number is not None:
            return await find_by_room(env, room_number, seminar_id)
        if seminar_id:
            return await list_for_seminar(env, seminar_id)
        return await self.store.list(env)

    async def create(self, env: StorageEnv, payload: AttendeeCreate) -> Attendee:
        created = await self.store.create(
            env,
            Attendee(
                id=_new_id(),
                seminar_id=payload.seminar_id,
                full_name=payload.full_name,
                room_number=payload.room_number,
            ),
        )
        await self._created(created)
        return created

    async def bulk_create(self, env: StorageEnv, payload: BulkAttendeeRequest) -> List[Attendee]:
        """Rows that fail validation are skipped; the rest are created in order."""
        created: List[Attendee] = []
        skipped = 0
        for row in payload.attendees:
            try:
                data = BulkAttendee.model_validate(row)
            except ValidationError as e:
                skipped += 1
                logger.debug("Bulk attendee row skipped: %s", e.errors()[:1])
                continue
            att = await self.store.create(
                env,
                Attendee(
                    id=_new_id(),
                    seminar_id=payload.seminar_id,
                    full_name=data.full_name,
                    room_number=data.room_number,
                ),
            )
            await self._created(att)
            created.append(att)
        logger.info(
            "Bulk import into %s: created=%d skipped=%d", payload.seminar_id, len(created), skipped
        )
        return created

    async def update(self, env: StorageEnv, attendee_id: str, patch: AttendeeUpdate) -> Attendee:
        if not await self.store.exists(env, attendee_id):
            raise NotFoundError("Attendee not found")
        await self.store.patch(env, attendee_id, patch.to_patch())
        updated = await self.store.get_state(env, attendee_id)
        await self.bus.publish_safe(
            event="attendee.updated",
            payload=AttendeeEvent(id=updated.id, seminar_id=updated.seminar_id, room_number=updated.room_number).model_dump(),
        )
        return updated

    async def delete(self, env: StorageEnv, attendee_id: str) -> None:
        if not await self.store.delete(env, attendee_id):
            raise NotFoundError("Attendee not found")
        await self.bus.publish_safe(event="attendee.deleted", payload=AttendeeEvent(id=attendee_id).model_dump(exclude_none=True))

    async def check_in(self, env: StorageEnv, attendee_id: str) -> Attendee:
        """Mark breakfast as served today (in the configured zone)."""
        if not await self.store.exists(env, attendee_id):
            raise NotFoundError("Attendee not found")
        today = env.today().isoformat()
        updated = await mark_breakfast_taken(env, attendee_id, today)
        logger.info("Check-in: %s room %s on %s", updated.id, updated.room_number, today)
        await self.bus.publish_safe(
            event="attendee.checked_in",
            payload=CheckinEvent(attendee_id=updated.id, seminar_id=updated.seminar_id, date=today).model_dump(),
        )
        return updated

    async def _created(self, att: Attendee) -> None:
        await self.bus.publish_safe(
            event="attendee.created",
            payload=AttendeeEvent(id=att.id, seminar_id=att.seminar_id, room_number=att.room_number).model_dump(),
        )
