"""
Ride endpoints.

Start and end place are referenced by id (``{"startPlace": {"id": 1}}``)
and returned as complete place objects.  The reservations of a ride
are listed through ``GET /rides/{ride_id}/reservations``.
"""

import logging
from typing import List, Tuple

from fastapi import APIRouter, Depends, Response, status

from ride_api.app.api.deps import sort_order
from ride_api.app.core import header_util
from ride_api.app.schemas.reservation import Reservation
from ride_api.app.schemas.ride import Ride
from ride_api.app.services.reservation_service import ReservationService
from ride_api.app.services.ride_service import RideService

logger = logging.getLogger(__name__)

router = APIRouter()

ENTITY_NAME = "ride"


@router.post("", response_model=Ride, status_code=status.HTTP_201_CREATED)
async def create_ride(ride: Ride, response: Response):
    """Create a new ride.

    Answers 400 if the ride already has an ID.  The seat count must lie
    between 1 and 7.
    """
    logger.debug("REST request to save Ride : %s", ride)
    if ride.id is not None:
        return Response(
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=header_util.create_failure_alert(ENTITY_NAME, "idexists", "A new ride cannot already have an ID"),
        )
    result = await RideService.save(ride)
    response.headers["Location"] = f"/api/rides/{result.id}"
    response.headers.update(header_util.create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("", response_model=Ride)
async def update_ride(ride: Ride, response: Response) -> Ride:
    """Update an existing ride, or create it if the body has no ID."""
    logger.debug("REST request to update Ride : %s", ride)
    if ride.id is None:
        response.status_code = status.HTTP_201_CREATED
        return await create_ride(ride, response)
    result = await RideService.save(ride)
    response.headers.update(header_util.create_entity_update_alert(ENTITY_NAME, str(ride.id)))
    return result


@router.get("", response_model=List[Ride])
async def get_all_rides(sort: List[Tuple[str, str]] = Depends(sort_order)) -> List[Ride]:
    """Return all rides, including those flagged as deleted."""
    logger.debug("REST request to get all Rides")
    return await RideService.find_all(sort=sort)


@router.get("/{ride_id}", response_model=Ride, responses={404: {"description": "Ride not found"}})
async def get_ride(ride_id: int):
    logger.debug("REST request to get Ride : %s", ride_id)
    ride = await RideService.find_one(ride_id)
    if ride is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return ride


@router.get(
    "/{ride_id}/reservations",
    response_model=List[Reservation],
    responses={404: {"description": "Ride not found"}},
)
async def get_ride_reservations(ride_id: int):
    """List the reservations made for a ride."""
    logger.debug("REST request to get Reservations of Ride : %s", ride_id)
    if await RideService.find_one(ride_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return await ReservationService.find_by_ride(ride_id)


@router.delete("/{ride_id}")
async def delete_ride(ride_id: int) -> Response:
    """Delete a ride.

    Fails with a server error while reservations still reference the
    ride.
    """
    logger.debug("REST request to delete Ride : %s", ride_id)
    await RideService.delete(ride_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=header_util.create_entity_deletion_alert(ENTITY_NAME, str(ride_id)),
    )
