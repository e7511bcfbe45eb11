"""
Service layer for rides.

Rides are saved together with the ids of their start and end place;
the places themselves are managed through ``PlaceService``.  The
``deleted`` flag is stored like any other field and is not used to
filter reads.
"""

from ..repositories import ride_repository
from ..schemas.ride import Ride
from .base import CrudService


class RideService(CrudService[Ride]):
    repository = ride_repository
    entity_label = "Ride"
