"""
Car endpoints.

Create, read, update and delete cars.  Mutating requests answer with
alert headers (see ``core.header_util``).
"""

import logging
from typing import List, Tuple

from fastapi import APIRouter, Depends, Response, status

from ride_api.app.api.deps import sort_order
from ride_api.app.core import header_util
from ride_api.app.schemas.car import Car
from ride_api.app.services.car_service import CarService

logger = logging.getLogger(__name__)

router = APIRouter()

ENTITY_NAME = "car"


@router.post("", response_model=Car, status_code=status.HTTP_201_CREATED)
async def create_car(car: Car, response: Response):
    """Create a new car.

    Answers 400 if the car already has an ID.
    """
    logger.debug("REST request to save Car : %s", car)
    if car.id is not None:
        return Response(
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=header_util.create_failure_alert(ENTITY_NAME, "idexists", "A new car cannot already have an ID"),
        )
    result = await CarService.save(car)
    response.headers["Location"] = f"/api/cars/{result.id}"
    response.headers.update(header_util.create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("", response_model=Car)
async def update_car(car: Car, response: Response) -> Car:
    """Update an existing car, or create it if the body has no ID."""
    logger.debug("REST request to update Car : %s", car)
    if car.id is None:
        response.status_code = status.HTTP_201_CREATED
        return await create_car(car, response)
    result = await CarService.save(car)
    response.headers.update(header_util.create_entity_update_alert(ENTITY_NAME, str(car.id)))
    return result


@router.get("", response_model=List[Car])
async def get_all_cars(sort: List[Tuple[str, str]] = Depends(sort_order)) -> List[Car]:
    logger.debug("REST request to get all Cars")
    return await CarService.find_all(sort=sort)


@router.get("/{car_id}", response_model=Car, responses={404: {"description": "Car not found"}})
async def get_car(car_id: int):
    logger.debug("REST request to get Car : %s", car_id)
    car = await CarService.find_one(car_id)
    if car is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return car


@router.delete("/{car_id}")
async def delete_car(car_id: int) -> Response:
    """Delete a car.  Succeeds whether or not the car existed."""
    logger.debug("REST request to delete Car : %s", car_id)
    await CarService.delete(car_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=header_util.create_entity_deletion_alert(ENTITY_NAME, str(car_id)),
    )
