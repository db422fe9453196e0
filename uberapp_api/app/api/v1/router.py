"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When a new resource is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import cars, drivers, info, passengers, rides, sessions

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(cars.router, prefix="/cars", tags=["cars"])
router.include_router(drivers.router, prefix="/drivers", tags=["drivers"])
router.include_router(passengers.router, prefix="/passengers", tags=["passengers"])
router.include_router(rides.router, prefix="/rides", tags=["rides"])
router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
