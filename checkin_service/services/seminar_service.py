from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from checkin_service.dal.attendee_dal import attendee_store, list_for_seminar
from checkin_service.dal.seminar_dal import seminar_store
from checkin_service.env import StorageEnv
from checkin_service.errors import NotFoundError
from checkin_service.events import RabbitBus, SeminarEvent, get_bus
from checkin_service.models import Seminar, SeminarCreate, SeminarUpdate

logger = logging.getLogger("checkin_service.services.seminars")


class SeminarService:
    def __init__(self, bus: Optional[RabbitBus] = None) -> None:
        self.store = seminar_store
        self._bus = bus

    @property
    def bus(self) -> RabbitBus:
        return self._bus or get_bus()

    async def list(self, env: StorageEnv) -> List[Seminar]:
        return await self.store.list(env)

    async def get(self, env: StorageEnv, seminar_id: str) -> Seminar:
        if not await self.store.exists(env, seminar_id):
            raise NotFoundError("Seminar not found")
        return await self.store.get_state(env, seminar_id)

    async def create(self, env: StorageEnv, payload: SeminarCreate) -> Seminar:
        created = await self.store.create(env, payload.to_record(str(uuid.uuid4())))
        logger.info("Seminar created: %s (%s)", created.id, created.name)
        await self.bus.publish_safe(
            event="seminar.created",
            payload=SeminarEvent(id=created.id, name=created.name).model_dump(exclude_none=True),
        )
        return created

    async def update(self, env: StorageEnv, seminar_id: str, patch: SeminarUpdate) -> Seminar:
        if not await self.store.exists(env, seminar_id):
            raise NotFoundError("Seminar not found")
        await self.store.patch(env, seminar_id, patch.to_patch())
        updated = await self.store.get_state(env, seminar_id)
        await self.bus.publish_safe(
            event="seminar.updated",
            payload=SeminarEvent(id=updated.id, name=updated.name).model_dump(exclude_none=True),
        )
        return updated

    async def delete(self, env: StorageEnv, seminar_id: str) -> int:
        """
        Delete a seminar and cascade to its roster.
        Returns the number of attendees removed; NotFoundError if the seminar is absent.
        """
        if not await self.store.delete(env, seminar_id):
            raise NotFoundError("Seminar not found")

        roster = [a.id for a in await list_for_seminar(env, seminar_id)]
        removed = 0
        if roster:
            results = await attendee_store.delete_many(env, roster)
            removed = sum(1 for ok in results.values() if ok)
        logger.info("Seminar deleted: %s (cascade removed %d attendee(s))", seminar_id, removed)
        await self.bus.publish_safe(
            event="seminar.deleted",
            payload=SeminarEvent(id=seminar_id, attendees_removed=removed).model_dump(exclude_none=True),
        )
        return removed
