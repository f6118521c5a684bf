from .indexed_entity import EntityConfig, IndexedEntityStore
from .seminar_dal import SEMINAR_ENTITY, seminar_store
from .attendee_dal import ATTENDEE_ENTITY, attendee_store

__all__ = [
    "EntityConfig",
    "IndexedEntityStore",
    "SEMINAR_ENTITY",
    "seminar_store",
    "ATTENDEE_ENTITY",
    "attendee_store",
]
