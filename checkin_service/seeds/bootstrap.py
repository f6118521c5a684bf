# checkin_service/seeds/bootstrap.py
from __future__ import annotations

import logging

from checkin_service.dal.attendee_dal import attendee_store
from checkin_service.dal.seminar_dal import seminar_store
from checkin_service.env import StorageEnv

log = logging.getLogger("checkin_service.seeds")


async def run_all_seeds(env: StorageEnv) -> None:
    """
    Ensure every entity index exists, seeding demo data the first time.
    Idempotent and cheap once initialized, so it runs ahead of every API call.
    With SEED_DEMO_DATA=0 the indexes are created empty.
    """
    await seminar_store.ensure_seed(env)
    await attendee_store.ensure_seed(env)
