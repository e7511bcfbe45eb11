"""
Pydantic model for places.

Places are used as the start and end location of a ride.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .fields import DbInt


class Place(BaseModel):
    id: Optional[DbInt] = None
    latitude: Optional[float] = Field(None, examples=[52.52])
    longitude: Optional[float] = Field(None, examples=[13.405])
    postcode: Optional[DbInt] = Field(None, examples=[10115])
    city_name: Optional[str] = Field(None, alias="cityName", examples=["Berlin"])

    model_config = {
        "populate_by_name": True,
    }
