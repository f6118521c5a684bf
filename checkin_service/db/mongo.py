from __future__ import annotations

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from checkin_service.config import settings

_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    """
    Lazily create (and reuse) the Motor client.
    """
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(settings.mongo_uri)
    return _client


def get_db() -> AsyncIOMotorDatabase:
    """
    Return the database handle using configured DB name.
    """
    return get_client()[settings.mongo_db]


def get_kv_collection() -> AsyncIOMotorCollection:
    return get_db()[settings.kv_collection]


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
