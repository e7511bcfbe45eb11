"""Repository for the ``reservation`` table."""

import sqlite3
from typing import List

from ..schemas.reservation import Reservation
from .base import SQLiteRepository
from .ride import RideRepository


class ReservationRepository(SQLiteRepository[Reservation]):
    table = "reservation"
    model = Reservation
    columns = {
        "passenger_id": "passenger_id",
        "confirmed": "confirmed",
        "cancled": "cancled",
    }

    def __init__(self, ride_repository: RideRepository):
        super().__init__(references={"ride": ("ride_id", ride_repository)})

    def find_by_ride(self, conn: sqlite3.Connection, ride_id: int) -> List[Reservation]:
        """Return the reservations referencing ``ride_id``, oldest first."""
        return self._find_where(conn, "ride_id", ride_id)
