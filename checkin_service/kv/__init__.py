from .base import KVStore
from .memory_kv import MemoryKVStore
from .mongo_kv import MongoKVStore

__all__ = ["KVStore", "MemoryKVStore", "MongoKVStore"]
