"""Repository for the ``ride`` table.

The start and end place are stored as ``start_place_id`` and
``end_place_id`` and resolved through a ``PlaceRepository``.
"""

from ..schemas.ride import Ride
from .base import SQLiteRepository
from .place import PlaceRepository


class RideRepository(SQLiteRepository[Ride]):
    table = "ride"
    model = Ride
    columns = {
        "driver_id": "driver_id",
        "start_date_time": "start_date_time",
        "flexible_start_place": "flexible_start_place",
        "flexible_end_place": "flexible_end_place",
        "price": "price",
        "number_of_seats": "number_of_seats",
        "description": "description",
        "created_at": "created_at",
        "deleted": "deleted",
    }

    def __init__(self, place_repository: PlaceRepository):
        super().__init__(
            references={
                "start_place": ("start_place_id", place_repository),
                "end_place": ("end_place_id", place_repository),
            }
        )
