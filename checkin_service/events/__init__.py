# checkin_service/events/__init__.py
from .rabbit import RabbitBus, get_bus, set_bus
from .routing import rk
from .schemas import EventEnvelope, SeminarEvent, AttendeeEvent, CheckinEvent

__all__ = ["RabbitBus", "get_bus", "set_bus", "rk", "EventEnvelope", "SeminarEvent", "AttendeeEvent", "CheckinEvent"]
