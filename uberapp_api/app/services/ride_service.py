"""
Business logic for rides.

A ride request only needs its type and end points; ``requestTime``
defaults to the moment the request is stored and ``status`` to
``REQUESTED``.  Passenger, driver and car ids are weak references and
are checked for shape only.
"""

import time
from types import MappingProxyType
from typing import Any, Mapping

from ..core.resources import UUID_PATTERN, FieldRule, ResourceRules
from .car_service import RIDE_TYPES
from .resource_service import ResourceService

RIDE_STATUSES = frozenset(
    {"REQUESTED", "AWAITING_DRIVER", "DRIVER_ASSIGNED", "IN_PROGRESS", "ARRIVED", "CLOSED"}
)


def _reference(name: str) -> FieldRule:
    return FieldRule(name, pattern=UUID_PATTERN, pattern_hint="must be an entity id")


RIDE_RULES = ResourceRules(
    label="Ride",
    collection="rides",
    fields=(
        FieldRule("rideType", required=True, choices=RIDE_TYPES),
        FieldRule("startPointLat", required=True, minimum=-90, maximum=90),
        FieldRule("startPointLong", required=True, minimum=-180, maximum=180),
        FieldRule("endPointLat", required=True, minimum=-90, maximum=90),
        FieldRule("endPointLong", required=True, minimum=-180, maximum=180),
        FieldRule("requestTime", required=True, minimum=0),
        FieldRule("pickupTime", minimum=0),
        FieldRule("dropOffTime", minimum=0),
        FieldRule("status", required=True, choices=RIDE_STATUSES),
        FieldRule("fare", minimum=0),
        _reference("passengerId"),
        _reference("driverId"),
        _reference("carId"),
    ),
)


def now_millis() -> int:
    return int(time.time() * 1000)


class RideService(ResourceService):
    rules = RIDE_RULES

    @classmethod
    def apply_defaults(cls, candidate: Mapping[str, Any]) -> Mapping[str, Any]:
        data = dict(candidate)
        if data.get("requestTime") is None:
            data["requestTime"] = now_millis()
        if not data.get("status"):
            data["status"] = "REQUESTED"
        return MappingProxyType(data)
