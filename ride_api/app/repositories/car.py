"""Repository for the ``car`` table."""

from ..schemas.car import Car
from .base import SQLiteRepository


class CarRepository(SQLiteRepository[Car]):
    table = "car"
    model = Car
    columns = {
        "user_id": "user_id",
        "brand": "brand",
        "model": "model",
        "color": "color",
    }
