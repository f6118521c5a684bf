from __future__ import annotations

from checkin_service.dal.indexed_entity import EntityConfig, IndexedEntityStore
from checkin_service.models import Seminar
from checkin_service.seeds.seed_seminars import demo_seminars

SEMINAR_ENTITY: EntityConfig[Seminar] = EntityConfig(
    entity_name="seminar",
    index_name="seminars",
    model=Seminar,
    initial_state=Seminar(),
    seed_data=demo_seminars,
)

seminar_store: IndexedEntityStore[Seminar] = IndexedEntityStore(SEMINAR_ENTITY)
