from __future__ import annotations
from enum import Enum

SERVICE = "checkin"


class Version(str, Enum):
    V1 = "v1"


def rk(org: str, event: str, service: str = SERVICE, version: str = Version.V1.value) -> str:
    """
    Build the canonical versioned routing key:
        <org>.<service>.<event>.<version>

    Examples:
        rk("acme", "attendee.checked_in") -> "acme.checkin.attendee.checked_in.v1"
    """
    return f"{org}.{service}.{event}.{version}"
