"""
Top-level API router.

Aggregates the per-entity routers.  The application mounts this router
under ``/api``; when a new entity is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import cars, places, reservations, rides

router = APIRouter()

router.include_router(cars.router, prefix="/cars", tags=["cars"])
router.include_router(places.router, prefix="/places", tags=["places"])
router.include_router(reservations.router, prefix="/reservations", tags=["reservations"])
router.include_router(rides.router, prefix="/rides", tags=["rides"])
