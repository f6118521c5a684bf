from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Protocol, Sequence


class KVStore(Protocol):
    """
    Durable mapping from string key to a JSON-compatible value.

    List-valued keys double as ordered sets: set_add/set_remove must be atomic
    per key so concurrent writers cannot lose members.
    """

    async def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    async def get_many(self, keys: Sequence[str]) -> Dict[str, Any]:
        """Missing keys are simply absent from the result."""
        raise NotImplementedError

    async def put(self, key: str, value: Any) -> None:
        raise NotImplementedError

    async def put_if_absent(self, key: str, value: Any) -> bool:
        """Write only when the key does not exist; True if written."""
        raise NotImplementedError

    async def put_if_present(self, key: str, value: Any) -> bool:
        """Replace only when the key exists; False (nothing written) otherwise."""
        raise NotImplementedError

    async def delete(self, key: str) -> bool:
        raise NotImplementedError

    async def exists(self, key: str) -> bool:
        raise NotImplementedError

    async def set_add(self, key: str, member: str) -> bool:
        """Append member unless present (creating the list); True if appended."""
        raise NotImplementedError

    async def set_remove(self, key: str, members: Iterable[str]) -> None:
        raise NotImplementedError

    async def ping(self) -> bool:
        raise NotImplementedError
