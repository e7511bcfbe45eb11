"""
Data access layer.

One repository per table.  The module-level instances below are wired
together once so that references (ride to place, reservation to ride)
are resolved by the same objects the services use.
"""

from .base import SQLiteRepository
from .car import CarRepository
from .place import PlaceRepository
from .reservation import ReservationRepository
from .ride import RideRepository

car_repository = CarRepository()
place_repository = PlaceRepository()
ride_repository = RideRepository(place_repository)
reservation_repository = ReservationRepository(ride_repository)

__all__ = [
    "SQLiteRepository",
    "CarRepository",
    "PlaceRepository",
    "RideRepository",
    "ReservationRepository",
    "car_repository",
    "place_repository",
    "ride_repository",
    "reservation_repository",
]
