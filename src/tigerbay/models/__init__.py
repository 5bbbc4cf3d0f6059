"""Pydantic models mirroring the TigerBay API's JSON shapes."""

from . import (
    agents,
    common,
    content,
    customers,
    departures,
    marketing,
    notes,
    passengers,
    payments,
    reservations,
    tasks,
    tours,
)
from .common import (
    ApiModel,
    HasSelfLink,
    HealthCheckEntry,
    Link,
    LinkedObject,
    Price,
    UpdateOperation,
)

__all__ = [
    "ApiModel",
    "HasSelfLink",
    "HealthCheckEntry",
    "Link",
    "LinkedObject",
    "Price",
    "UpdateOperation",
    "agents",
    "common",
    "content",
    "customers",
    "departures",
    "marketing",
    "notes",
    "passengers",
    "payments",
    "reservations",
    "tasks",
    "tours",
]
