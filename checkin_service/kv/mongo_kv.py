from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, Iterable, Optional, Sequence

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError
from pymongo.errors import PyMongoError

from checkin_service.db.mongo import get_kv_collection
from checkin_service.errors import StorageUnavailableError

logger = logging.getLogger("checkin_service.kv.mongo")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MongoKVStore:
    """
    KVStore on a single Mongo collection.
    Document shape: {_id: <key>, value: <json>, updated_at: <datetime>}
    """

    def __init__(self, col: Optional[AsyncIOMotorCollection] = None):
        self.col = col if col is not None else get_kv_collection()

    @asynccontextmanager
    async def _guard(self, op: str, key: str) -> AsyncIterator[None]:
        try:
            yield
        except PyMongoError as e:
            logger.exception("KV %s failed for key '%s': %s", op, key, e)
            raise StorageUnavailableError(f"Storage unavailable during {op}") from e

    async def get(self, key: str) -> Optional[Any]:
        async with self._guard("get", key):
            doc = await self.col.find_one({"_id": key})
        return doc["value"] if doc else None

    async def get_many(self, keys: Sequence[str]) -> Dict[str, Any]:
        if not keys:
            return {}
        async with self._guard("get_many", ",".join(keys[:3])):
            cursor = self.col.find({"_id": {"$in": list(keys)}})
            return {d["_id"]: d["value"] async for d in cursor}

    async def put(self, key: str, value: Any) -> None:
        async with self._guard("put", key):
            await self.col.replace_one(
                {"_id": key},
                {"_id": key, "value": value, "updated_at": _utcnow()},
                upsert=True,
            )

    async def put_if_absent(self, key: str, value: Any) -> bool:
        async with self._guard("put_if_absent", key):
            try:
                await self.col.insert_one({"_id": key, "value": value, "updated_at": _utcnow()})
            except MongoDuplicateKeyError:
                return False
        return True

    async def put_if_present(self, key: str, value: Any) -> bool:
        async with self._guard("put_if_present", key):
            res = await self.col.replace_one(
                {"_id": key},
                {"_id": key, "value": value, "updated_at": _utcnow()},
            )
        return res.matched_count == 1

    async def delete(self, key: str) -> bool:
        async with self._guard("delete", key):
            res = await self.col.delete_one({"_id": key})
        return res.deleted_count == 1

    async def exists(self, key: str) -> bool:
        async with self._guard("exists", key):
            return await self.col.count_documents({"_id": key}, limit=1) > 0

    async def set_add(self, key: str, member: str) -> bool:
        """
        Atomic append-if-absent. The $ne filter makes the upsert collide on _id
        when the member is already there, which is reported as "not added".
        """
        async with self._guard("set_add", key):
            try:
                await self.col.update_one(
                    {"_id": key, "value": {"$ne": member}},
                    {"$push": {"value": member}, "$set": {"updated_at": _utcnow()}},
                    upsert=True,
                )
            except MongoDuplicateKeyError:
                return False
        return True

    async def set_remove(self, key: str, members: Iterable[str]) -> None:
        drop = list(members)
        if not drop:
            return
        async with self._guard("set_remove", key):
            await self.col.update_one(
                {"_id": key},
                {"$pull": {"value": {"$in": drop}}, "$set": {"updated_at": _utcnow()}},
            )

    async def ping(self) -> bool:
        async with self._guard("ping", "-"):
            await self.col.database.command("ping")
        return True
