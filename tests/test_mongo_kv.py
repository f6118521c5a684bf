from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from checkin_service.errors import StorageUnavailableError
from checkin_service.kv import MongoKVStore


def _collection(**methods):
    col = MagicMock()
    for name, mock in methods.items():
        setattr(col, name, mock)
    return col


@pytest.mark.asyncio
async def test_get_unwraps_value():
    col = _collection(find_one=AsyncMock(return_value={"_id": "k", "value": {"a": 1}}))
    kv = MongoKVStore(col)
    assert await kv.get("k") == {"a": 1}
    col.find_one.assert_awaited_once_with({"_id": "k"})


@pytest.mark.asyncio
async def test_get_missing_returns_none():
    kv = MongoKVStore(_collection(find_one=AsyncMock(return_value=None)))
    assert await kv.get("k") is None


@pytest.mark.asyncio
async def test_driver_failure_becomes_storage_unavailable():
    kv = MongoKVStore(_collection(find_one=AsyncMock(side_effect=ServerSelectionTimeoutError("down"))))
    with pytest.raises(StorageUnavailableError):
        await kv.get("k")


@pytest.mark.asyncio
async def test_put_if_absent_reports_duplicate_as_false():
    col = _collection(insert_one=AsyncMock(side_effect=[None, DuplicateKeyError("dup")]))
    kv = MongoKVStore(col)
    assert await kv.put_if_absent("k", 1) is True
    assert await kv.put_if_absent("k", 2) is False


@pytest.mark.asyncio
async def test_set_add_uses_guarded_push():
    col = _collection(update_one=AsyncMock(side_effect=[None, DuplicateKeyError("dup")]))
    kv = MongoKVStore(col)
    assert await kv.set_add("idx", "a") is True
    assert await kv.set_add("idx", "a") is False

    flt, update = col.update_one.await_args_list[0].args
    assert flt == {"_id": "idx", "value": {"$ne": "a"}}
    assert update["$push"] == {"value": "a"}
    assert col.update_one.await_args_list[0].kwargs == {"upsert": True}


@pytest.mark.asyncio
async def test_set_remove_pulls_members_and_skips_empty():
    col = _collection(update_one=AsyncMock())
    kv = MongoKVStore(col)
    await kv.set_remove("idx", [])
    col.update_one.assert_not_awaited()

    await kv.set_remove("idx", ["a", "b"])
    flt, update = col.update_one.await_args.args
    assert flt == {"_id": "idx"}
    assert update["$pull"] == {"value": {"$in": ["a", "b"]}}


@pytest.mark.asyncio
async def test_delete_and_exists():
    col = _collection(
        delete_one=AsyncMock(return_value=MagicMock(deleted_count=0)),
        count_documents=AsyncMock(return_value=1),
    )
    kv = MongoKVStore(col)
    assert await kv.delete("k") is False
    assert await kv.exists("k") is True


@pytest.mark.asyncio
async def test_put_if_present_replaces_without_upsert():
    col = _collection(
        replace_one=AsyncMock(side_effect=[MagicMock(matched_count=1), MagicMock(matched_count=0)])
    )
    kv = MongoKVStore(col)
    assert await kv.put_if_present("k", {"a": 1}) is True
    assert await kv.put_if_present("k", {"a": 2}) is False

    call = col.replace_one.await_args_list[0]
    assert call.args[0] == {"_id": "k"}
    assert call.args[1]["value"] == {"a": 1}
    assert "upsert" not in call.kwargs
