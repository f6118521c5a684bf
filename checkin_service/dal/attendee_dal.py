from __future__ import annotations

from typing import List, Optional

from checkin_service.dal.indexed_entity import EntityConfig, IndexedEntityStore
from checkin_service.env import StorageEnv
from checkin_service.errors import RecordValidationError
from checkin_service.models import Attendee, validate_date_key
from checkin_service.seeds.seed_attendees import demo_attendees

ATTENDEE_ENTITY: EntityConfig[Attendee] = EntityConfig(
    entity_name="attendee",
    index_name="attendees",
    model=Attendee,
    initial_state=Attendee(),
    seed_data=demo_attendees,
)

attendee_store: IndexedEntityStore[Attendee] = IndexedEntityStore(ATTENDEE_ENTITY)


async def mark_breakfast_taken(env: StorageEnv, attendee_id: str, date_key: str) -> Attendee:
    """
    Set breakfast_status[date_key] = True, leaving other days untouched.
    Idempotent; raises NotFoundError for an unknown attendee.
    """
    try:
        validate_date_key(date_key)
    except ValueError as e:
        raise RecordValidationError(str(e)) from e

    def _served(a: Attendee) -> Attendee:
        return a.model_copy(update={"breakfast_status": {**a.breakfast_status, date_key: True}})

    return await attendee_store.mutate(env, attendee_id, _served)


async def list_for_seminar(env: StorageEnv, seminar_id: str) -> List[Attendee]:
    return [a for a in await attendee_store.list(env) if a.seminar_id == seminar_id]


async def find_by_room(env: StorageEnv, room_number: str, seminar_id: Optional[str] = None) -> List[Attendee]:
    room = room_number.strip()
    return [
        a
        for a in await attendee_store.list(env)
        if a.room_number == room and (seminar_id is None or a.seminar_id == seminar_id)
    ]
