"""Ride endpoints for API v1."""

from ....schemas.ride import RidePayload, RideRead
from ....services.ride_service import RideService
from ._crud import crud_router

router = crud_router(RideService, RidePayload, RideRead)
