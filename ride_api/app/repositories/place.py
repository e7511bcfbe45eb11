"""Repository for the ``place`` table."""

from ..schemas.place import Place
from .base import SQLiteRepository


class PlaceRepository(SQLiteRepository[Place]):
    table = "place"
    model = Place
    columns = {
        "latitude": "latitude",
        "longitude": "longitude",
        "postcode": "postcode",
        "city_name": "city_name",
    }
