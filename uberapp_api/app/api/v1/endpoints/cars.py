"""
Car endpoints for API v1.

Standard list/get/create/delete/update routes.  Cars owned by a driver
are managed under ``/drivers/{driverId}/cars``, see ``drivers``.
"""

from ....schemas.car import CarPayload, CarRead
from ....services.car_service import CarService
from ._crud import crud_router

router = crud_router(CarService, CarPayload, CarRead)
