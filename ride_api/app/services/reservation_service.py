"""
Service layer for reservations.

Besides the plain CRUD operations this service answers which
reservations belong to a ride.  The ride does not keep a list of its
reservations; the lookup is a query on ``reservation.ride_id``.
"""

import logging
from typing import List

from ..core.db import transaction
from ..repositories import reservation_repository
from ..schemas.reservation import Reservation
from .base import CrudService

logger = logging.getLogger(__name__)


class ReservationService(CrudService[Reservation]):
    repository = reservation_repository
    entity_label = "Reservation"

    @classmethod
    async def find_by_ride(cls, ride_id: int) -> List[Reservation]:
        """Return all reservations made for ``ride_id``."""
        logger.debug("Request to get Reservations of Ride : %s", ride_id)
        with transaction(read_only=True) as conn:
            return cls.repository.find_by_ride(conn, ride_id)
