"""Service layer for cars."""

from ..repositories import car_repository
from ..schemas.car import Car
from .base import CrudService


class CarService(CrudService[Car]):
    repository = car_repository
    entity_label = "Car"
