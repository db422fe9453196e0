"""
Business logic for cars.

Cars are plain resources plus one relation: a car created through
``/drivers/{driverId}/cars`` records the driver's id in ``driverId``.
The reference is weak; deleting the driver leaves its cars in place.
"""

from typing import Any, Dict, List, Mapping

from ..core.db import MongoStore
from ..core.query import QueryClause
from ..core.resources import FieldRule, ResourceRules
from .account_service import DriverService
from .resource_service import ResourceService

RIDE_TYPES = frozenset({"ECONOMY", "PREMIUM", "EXECUTIVE"})

CAR_RULES = ResourceRules(
    label="Car",
    collection="cars",
    fields=(
        FieldRule("make", required=True),
        FieldRule("model", required=True),
        FieldRule("license", required=True),
        FieldRule("carType", required=True),
        FieldRule("maxPassengers", required=True, minimum=0, exclusive_minimum=True, zero_is_absent=True),
        FieldRule("color"),
        FieldRule("validRideTypes", required=True, choices=RIDE_TYPES),
    ),
    read_only=("driverId",),
)


class CarService(ResourceService):
    rules = CAR_RULES

    @classmethod
    def list_for_driver(cls, store: MongoStore, raw_driver_id: str, clause: QueryClause = QueryClause()) -> List[Dict[str, Any]]:
        """List the cars owned by a driver; raises ``NotFound`` for an unknown driver."""
        driver = DriverService.get_entity(store, raw_driver_id)
        return cls.list_entities(store, clause, filters={"driverId": driver["id"]})

    @classmethod
    def create_for_driver(cls, store: MongoStore, raw_driver_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        driver = DriverService.get_entity(store, raw_driver_id)
        return cls.create_entity(store, payload, extra={"driverId": driver["id"]})
