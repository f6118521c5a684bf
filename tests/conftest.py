from datetime import date

import pytest
from fastapi.testclient import TestClient

from checkin_service.env import StorageEnv
from checkin_service.events import RabbitBus, set_bus
from checkin_service.kv import MemoryKVStore
from checkin_service.main import create_app

TODAY = date(2024, 6, 1)


@pytest.fixture(autouse=True)
def disabled_bus():
    """No broker in tests: every publish is a no-op."""
    bus = RabbitBus(enabled=False)
    set_bus(bus)
    yield bus
    set_bus(None)


@pytest.fixture
def kv() -> MemoryKVStore:
    return MemoryKVStore()


@pytest.fixture
def env(kv: MemoryKVStore) -> StorageEnv:
    return StorageEnv(kv=kv, seed_demo_data=True, today=lambda: TODAY)


@pytest.fixture
def empty_env(kv: MemoryKVStore) -> StorageEnv:
    return StorageEnv(kv=kv, seed_demo_data=False, today=lambda: TODAY)


@pytest.fixture
def client(env: StorageEnv):
    app = create_app(env)
    with TestClient(app) as c:
        yield c
