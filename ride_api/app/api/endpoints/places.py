"""
Place endpoints.

Places are the start and end locations referenced by rides.
"""

import logging
from typing import List, Tuple

from fastapi import APIRouter, Depends, Response, status

from ride_api.app.api.deps import sort_order
from ride_api.app.core import header_util
from ride_api.app.schemas.place import Place
from ride_api.app.services.place_service import PlaceService

logger = logging.getLogger(__name__)

router = APIRouter()

ENTITY_NAME = "place"


@router.post("", response_model=Place, status_code=status.HTTP_201_CREATED)
async def create_place(place: Place, response: Response):
    logger.debug("REST request to save Place : %s", place)
    if place.id is not None:
        return Response(
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=header_util.create_failure_alert(ENTITY_NAME, "idexists", "A new place cannot already have an ID"),
        )
    result = await PlaceService.save(place)
    response.headers["Location"] = f"/api/places/{result.id}"
    response.headers.update(header_util.create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("", response_model=Place)
async def update_place(place: Place, response: Response) -> Place:
    logger.debug("REST request to update Place : %s", place)
    if place.id is None:
        response.status_code = status.HTTP_201_CREATED
        return await create_place(place, response)
    result = await PlaceService.save(place)
    response.headers.update(header_util.create_entity_update_alert(ENTITY_NAME, str(place.id)))
    return result


@router.get("", response_model=List[Place])
async def get_all_places(sort: List[Tuple[str, str]] = Depends(sort_order)) -> List[Place]:
    logger.debug("REST request to get all Places")
    return await PlaceService.find_all(sort=sort)


@router.get("/{place_id}", response_model=Place, responses={404: {"description": "Place not found"}})
async def get_place(place_id: int):
    logger.debug("REST request to get Place : %s", place_id)
    place = await PlaceService.find_one(place_id)
    if place is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return place


@router.delete("/{place_id}")
async def delete_place(place_id: int) -> Response:
    logger.debug("REST request to delete Place : %s", place_id)
    await PlaceService.delete(place_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=header_util.create_entity_deletion_alert(ENTITY_NAME, str(place_id)),
    )
