"""
Reservation endpoints.

A reservation may reference a ride by sending ``{"ride": {"id": ...}}``.
The response embeds the complete ride.  No check is made that the
ride still has free seats.
"""

import logging
from typing import List, Tuple

from fastapi import APIRouter, Depends, Response, status

from ride_api.app.api.deps import sort_order
from ride_api.app.core import header_util
from ride_api.app.schemas.reservation import Reservation
from ride_api.app.services.reservation_service import ReservationService

logger = logging.getLogger(__name__)

router = APIRouter()

ENTITY_NAME = "reservation"


@router.post("", response_model=Reservation, status_code=status.HTTP_201_CREATED)
async def create_reservation(reservation: Reservation, response: Response):
    logger.debug("REST request to save Reservation : %s", reservation)
    if reservation.id is not None:
        return Response(
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=header_util.create_failure_alert(ENTITY_NAME, "idexists", "A new reservation cannot already have an ID"),
        )
    result = await ReservationService.save(reservation)
    response.headers["Location"] = f"/api/reservations/{result.id}"
    response.headers.update(header_util.create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("", response_model=Reservation)
async def update_reservation(reservation: Reservation, response: Response) -> Reservation:
    logger.debug("REST request to update Reservation : %s", reservation)
    if reservation.id is None:
        response.status_code = status.HTTP_201_CREATED
        return await create_reservation(reservation, response)
    result = await ReservationService.save(reservation)
    response.headers.update(header_util.create_entity_update_alert(ENTITY_NAME, str(reservation.id)))
    return result


@router.get("", response_model=List[Reservation])
async def get_all_reservations(sort: List[Tuple[str, str]] = Depends(sort_order)) -> List[Reservation]:
    logger.debug("REST request to get all Reservations")
    return await ReservationService.find_all(sort=sort)


@router.get(
    "/{reservation_id}",
    response_model=Reservation,
    responses={404: {"description": "Reservation not found"}},
)
async def get_reservation(reservation_id: int):
    logger.debug("REST request to get Reservation : %s", reservation_id)
    reservation = await ReservationService.find_one(reservation_id)
    if reservation is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return reservation


@router.delete("/{reservation_id}")
async def delete_reservation(reservation_id: int) -> Response:
    logger.debug("REST request to delete Reservation : %s", reservation_id)
    await ReservationService.delete(reservation_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=header_util.create_entity_deletion_alert(ENTITY_NAME, str(reservation_id)),
    )
