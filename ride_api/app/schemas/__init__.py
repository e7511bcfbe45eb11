"""
Pydantic schema definitions for API payloads.

Each entity (cars, places, reservations, rides) defines one model that
is used both as request and response body.  Attribute names are
snake_case; the JSON representation uses the camelCase aliases.
"""

from .car import Car
from .place import Place
from .reservation import Reservation
from .ride import Ride

__all__ = ["Car", "Place", "Reservation", "Ride"]
