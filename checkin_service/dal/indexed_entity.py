from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Mapping,
    Sequence,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel, ValidationError

from checkin_service.errors import (
    DuplicateKeyError,
    IndexConsistencyError,
    NotFoundError,
    RecordValidationError,
    StorageUnavailableError,
    first_error_message,
)

if TYPE_CHECKING:
    from checkin_service.env import StorageEnv

T = TypeVar("T", bound=BaseModel)

SeedSource = Union[Sequence[T], Callable[[date], Sequence[T]]]


@dataclass(frozen=True)
class EntityConfig(Generic[T]):
    """
    Static description of one entity type.

      entity_name   -> record keys "<entity_name>:<id>"
      index_name    -> key holding the ordered list of all ids
      initial_state -> zero value returned by get_state() for unknown ids
      seed_data     -> records written the first time the index is created;
                       a callable receives "today" and is evaluated at
                       seeding time
    """
    entity_name: str
    index_name: str
    model: Type[T]
    initial_state: T
    seed_data: SeedSource = ()

    def seeds(self, today: date) -> List[T]:
        data = self.seed_data(today) if callable(self.seed_data) else self.seed_data
        return list(data)


class IndexedEntityStore(Generic[T]):
    """
    Typed records in a KVStore plus a per-type index of their ids.

    Invariant: the index lists exactly the ids that have a record key.
    Writes order the two keys so a reader never meets an index entry without
    its record: create writes the record before indexing it, delete unindexes
    before removing the record.
    """

    def __init__(self, config: EntityConfig[T]):
        self.config = config
        self.log = logging.getLogger(f"checkin_service.dal.{config.entity_name}")

    # ── keys / (de)serialization ───────────────────────────────
    def key(self, record_id: str) -> str:
        return f"{self.config.entity_name}:{record_id}"

    @property
    def index_key(self) -> str:
        return self.config.index_name

    def _dump(self, record: T) -> Dict[str, Any]:
        return record.model_dump(mode="json", by_alias=True)

    def _load(self, record_id: str, doc: Mapping[str, Any]) -> T:
        """Stored documents that no longer fit the model are a storage fault, not bad input."""
        try:
            return self.config.model.model_validate(doc)
        except ValidationError as e:
            self.log.error("[%s] stored record %s is unreadable: %s", self.index_key, self.key(record_id), e)
            raise StorageUnavailableError(f"Stored {self.config.entity_name} '{record_id}' is corrupt") from e

    def _validate(self, data: Mapping[str, Any]) -> T:
        try:
            return self.config.model.model_validate(data)
        except ValidationError as e:
            raise RecordValidationError(first_error_message(e)) from e

    def _storage_fields(self, record_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Map field names or aliases onto the stored (alias) keys."""
        names: Dict[str, str] = {}
        for name, info in self.config.model.model_fields.items():
            alias = info.alias or name
            names[name] = alias
            names[alias] = alias

        out: Dict[str, Any] = {}
        for k, v in fields.items():
            if k not in names:
                raise RecordValidationError(f"Unknown {self.config.entity_name} field '{k}'")
            if names[k] == "id" and v != record_id:
                raise RecordValidationError(f"Cannot change the id of {self.config.entity_name} '{record_id}'")
            out[names[k]] = v
        return out

    # ── seeding ────────────────────────────────────────────────
    async def ensure_seed(self, env: "StorageEnv") -> None:
        """
        Create the index on first use, seeding it once. Safe to call on every
        request: once the index exists this is a single existence read.
        """
        kv = env.kv
        if await kv.exists(self.index_key):
            return

        seeds = self.config.seeds(env.today()) if env.seed_demo_data else []
        ids: List[str] = []
        for rec in seeds:
            if rec.id in ids:
                continue
            await kv.put_if_absent(self.key(rec.id), self._dump(rec))
            ids.append(rec.id)

        if await kv.put_if_absent(self.index_key, ids):
            self.log.info("[%s] index created with %d seed record(s)", self.index_key, len(ids))
        else:
            # another caller initialized the index first; its seed set is the same
            self.log.debug("[%s] index already initialized concurrently", self.index_key)

    # ── reads ──────────────────────────────────────────────────
    async def list_ids(self, env: "StorageEnv") -> List[str]:
        return list(await env.kv.get(self.index_key) or [])

    async def list(self, env: "StorageEnv") -> List[T]:
        """All records in index (insertion) order."""
        ids = await self.list_ids(env)
        docs = await env.kv.get_many([self.key(i) for i in ids])
        items: List[T] = []
        for record_id in ids:
            doc = docs.get(self.key(record_id))
            if doc is None:
                if env.strict_index:
                    raise IndexConsistencyError(
                        f"Index '{self.index_key}' lists '{record_id}' but no record exists"
                    )
                self.log.warning("[%s] skipping index entry without record: %s", self.index_key, record_id)
                continue
            items.append(self._load(record_id, doc))
        return items

    async def exists(self, env: "StorageEnv", record_id: str) -> bool:
        return await env.kv.exists(self.key(record_id))

    async def get_state(self, env: "StorageEnv", record_id: str) -> T:
        """Current record, or a copy of the zero value when it was never created."""
        doc = await env.kv.get(self.key(record_id))
        if doc is None:
            return self.config.initial_state.model_copy(deep=True)
        return self._load(record_id, doc)

    # ── writes ─────────────────────────────────────────────────
    async def create(self, env: "StorageEnv", record: T) -> T:
        if not isinstance(record, self.config.model):
            raise RecordValidationError(f"Expected a {self.config.model.__name__} record")
        if not record.id:
            raise RecordValidationError(f"{self.config.entity_name} record requires an id")

        rec = self._validate(self._dump(record))
        if rec.id in await self.list_ids(env):
            raise DuplicateKeyError(f"{self.config.entity_name} '{rec.id}' already exists")
        if not await env.kv.put_if_absent(self.key(rec.id), self._dump(rec)):
            raise DuplicateKeyError(f"{self.config.entity_name} '{rec.id}' already exists")
        await env.kv.set_add(self.index_key, rec.id)
        self.log.debug("[%s] created %s", self.index_key, rec.id)
        return rec

    async def patch(self, env: "StorageEnv", record_id: str, fields: Mapping[str, Any]) -> T:
        """Shallow merge of fields into the stored record."""
        current = await env.kv.get(self.key(record_id))
        if current is None:
            raise NotFoundError(f"{self.config.entity_name.capitalize()} not found")
        merged = {**current, **self._storage_fields(record_id, fields)}
        rec = self._validate(merged)
        await self._write_back(env, record_id, rec)
        return rec

    async def mutate(self, env: "StorageEnv", record_id: str, fn: Callable[[T], T]) -> T:
        """
        Read-modify-write of a single record. fn gets a private copy and must
        return the full new record. Last writer wins per key; a record deleted
        meanwhile stays deleted (NotFoundError).
        """
        current = await env.kv.get(self.key(record_id))
        if current is None:
            raise NotFoundError(f"{self.config.entity_name.capitalize()} not found")
        updated = fn(self._load(record_id, current))
        if not isinstance(updated, self.config.model):
            raise RecordValidationError(f"mutate() must return a {self.config.model.__name__}")
        if updated.id != record_id:
            raise RecordValidationError(f"Cannot change the id of {self.config.entity_name} '{record_id}'")
        rec = self._validate(self._dump(updated))
        await self._write_back(env, record_id, rec)
        return rec

    async def _write_back(self, env: "StorageEnv", record_id: str, rec: T) -> None:
        # never upsert: an overlapping delete must not bring the record back unindexed
        if not await env.kv.put_if_present(self.key(record_id), self._dump(rec)):
            raise NotFoundError(f"{self.config.entity_name.capitalize()} not found")

    async def delete(self, env: "StorageEnv", record_id: str) -> bool:
        """True if a record was removed, False if it was already absent."""
        await env.kv.set_remove(self.index_key, [record_id])
        removed = await env.kv.delete(self.key(record_id))
        if removed:
            self.log.debug("[%s] deleted %s", self.index_key, record_id)
        return removed

    async def delete_many(self, env: "StorageEnv", record_ids: Iterable[str]) -> Dict[str, bool]:
        """Per-id accounting: True where a record was actually removed."""
        ids = list(dict.fromkeys(record_ids))
        if not ids:
            return {}
        await env.kv.set_remove(self.index_key, ids)
        results: Dict[str, bool] = {}
        for record_id in ids:
            results[record_id] = await env.kv.delete(self.key(record_id))
        self.log.debug(
            "[%s] delete_many removed %d of %d", self.index_key, sum(results.values()), len(ids)
        )
        return results
