# checkin_service/events/rabbit.py
from __future__ import annotations

import asyncio
import json
import logging
from typing import Optional

import aio_pika
from aio_pika import ExchangeType, Message

from checkin_service.config import settings
from checkin_service.events.routing import rk
from checkin_service.events.schemas import EventEnvelope

logger = logging.getLogger("checkin_service.events")


class RabbitBus:
    """
    Minimal async publisher using aio-pika.
    Usage:
        bus = await get_bus().connect()
        await bus.publish(event="attendee.checked_in", payload={...})

    With enabled=False every publish is a logged no-op, so the service runs
    without a broker.
    """
    def __init__(self, *, enabled: Optional[bool] = None) -> None:
        self.enabled = settings.events_enabled if enabled is None else enabled
        self._conn: Optional[aio_pika.abc.AbstractRobustConnection] = None
        self._chan: Optional[aio_pika.abc.AbstractChannel] = None
        self._ex: Optional[aio_pika.abc.AbstractExchange] = None
        self._lock = asyncio.Lock()

    async def connect(self) -> "RabbitBus":
        if not self.enabled:
            return self
        async with self._lock:
            if self._conn and not self._conn.is_closed:
                return self
            logger.info("Rabbit: connecting...")
            self._conn = await aio_pika.connect_robust(settings.rabbitmq_uri)
            self._chan = await self._conn.channel(publisher_confirms=False)
            self._ex = await self._chan.declare_exchange(
                settings.rabbitmq_exchange,
                ExchangeType.TOPIC,
                durable=True,
            )
            logger.info("Rabbit: connected and exchange declared (%s)", settings.rabbitmq_exchange)
        return self

    async def close(self) -> None:
        if self._conn and not self._conn.is_closed:
            await self._conn.close()
            logger.info("Rabbit: connection closed")
        self._conn = self._chan = self._ex = None

    async def publish(self, *, event: str, payload: dict, version: str = "v1", org: Optional[str] = None, headers: Optional[dict] = None) -> None:
        org = org or settings.events_org
        routing_key = rk(org, event, version=version)
        if not self.enabled:
            logger.debug("Rabbit: disabled, dropping %s", routing_key)
            return
        if not self._ex:
            await self.connect()

        envelope = EventEnvelope(event=event, org=org, version=version, payload=payload)
        body = json.dumps(envelope.model_dump(mode="json"), separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        message = Message(
            body=body,
            delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
            content_type="application/json",
            headers=headers or {},
        )
        await self._ex.publish(message, routing_key=routing_key)
        logger.info("Rabbit: published %s (%d bytes)", routing_key, len(body))

    async def publish_safe(self, *, event: str, payload: dict) -> None:
        """Fire-and-forget variant for request paths: a broker outage never fails the write."""
        try:
            await self.publish(event=event, payload=payload)
        except Exception as e:
            logger.warning("Rabbit: publish %s failed: %s", event, e)


_bus: Optional[RabbitBus] = None


def get_bus() -> RabbitBus:
    global _bus
    if _bus is None:
        _bus = RabbitBus()
    return _bus


def set_bus(bus: Optional[RabbitBus]) -> None:
    global _bus
    _bus = bus
