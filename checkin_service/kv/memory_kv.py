from __future__ import annotations

import asyncio
import copy
from typing import Any, Dict, Iterable, Optional, Sequence


class MemoryKVStore:
    """
    In-process KVStore used for tests and KV_BACKEND=memory.
    Values are deep-copied in and out so nothing is shared with callers.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._data.get(key))

    async def get_many(self, keys: Sequence[str]) -> Dict[str, Any]:
        return {k: copy.deepcopy(self._data[k]) for k in keys if k in self._data}

    async def put(self, key: str, value: Any) -> None:
        async with self._lock:
            self._data[key] = copy.deepcopy(value)

    async def put_if_absent(self, key: str, value: Any) -> bool:
        async with self._lock:
            if key in self._data:
                return False
            self._data[key] = copy.deepcopy(value)
            return True

    async def put_if_present(self, key: str, value: Any) -> bool:
        async with self._lock:
            if key not in self._data:
                return False
            self._data[key] = copy.deepcopy(value)
            return True

    async def delete(self, key: str) -> bool:
        async with self._lock:
            return self._data.pop(key, None) is not None

    async def exists(self, key: str) -> bool:
        return key in self._data

    async def set_add(self, key: str, member: str) -> bool:
        async with self._lock:
            members = self._data.setdefault(key, [])
            if member in members:
                return False
            members.append(member)
            return True

    async def set_remove(self, key: str, members: Iterable[str]) -> None:
        drop = set(members)
        async with self._lock:
            current = self._data.get(key)
            if current is None:
                return
            self._data[key] = [m for m in current if m not in drop]

    async def ping(self) -> bool:
        return True

    def keys(self) -> list[str]:
        return list(self._data)
