"""Service layer for places."""

from ..repositories import place_repository
from ..schemas.place import Place
from .base import CrudService


class PlaceService(CrudService[Place]):
    repository = place_repository
    entity_label = "Place"
