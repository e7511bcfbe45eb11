"""
Pydantic model for reservations.

A reservation optionally references the ride it was made for.  The
field name ``cancled`` is part of the stored and wire format and is
kept as is.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .fields import DbInt
from .ride import Ride


class Reservation(BaseModel):
    id: Optional[DbInt] = None
    passenger_id: Optional[DbInt] = Field(None, alias="passengerId", examples=[1])
    confirmed: Optional[bool] = None
    cancled: Optional[bool] = None
    ride: Optional[Ride] = None

    model_config = {
        "populate_by_name": True,
    }
