"""
Driver endpoints for API v1.

Besides the standard routes, a driver exposes the cars it owns:

* ``GET /drivers/{driverId}/cars`` lists them (same query parameters
  as ``GET /cars``);
* ``POST /drivers/{driverId}/cars`` creates a car owned by the driver.

Both return 404 when the driver does not exist.
"""

from typing import List

from fastapi import Depends, status

from ....core.db import MongoStore, get_store
from ....core.query import QueryClause
from ....schemas.account import DriverPayload, DriverRead
from ....schemas.car import CarPayload, CarRead
from ....services.account_service import DriverService
from ....services.car_service import CarService
from ..dependencies import clause_dependency
from ._crud import crud_router

router = crud_router(DriverService, DriverPayload, DriverRead)


@router.get("/{driver_id}/cars", response_model=List[CarRead])
def list_driver_cars(
    driver_id: str,
    clause: QueryClause = Depends(clause_dependency(CarService.rules)),
    store: MongoStore = Depends(get_store),
):
    return CarService.list_for_driver(store, driver_id, clause)


@router.post("/{driver_id}/cars", response_model=CarRead, status_code=status.HTTP_201_CREATED)
def create_driver_car(driver_id: str, payload: CarPayload, store: MongoStore = Depends(get_store)):
    return CarService.create_for_driver(store, driver_id, payload.to_fields())
