"""
Pydantic model for rides.

A ride references two places, its start and end location.  When a
ride is sent to the API only the ``id`` of each place is used; the
API always answers with the complete place objects.

Reservations point at their ride, not the other way round.  Use
``GET /api/rides/{id}/reservations`` to list them.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .place import Place
from .fields import DbInt


def as_aware(value: Optional[datetime]) -> Optional[datetime]:
    """Interpret naive date-times as UTC so they serialize with an offset."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Ride(BaseModel):
    id: Optional[DbInt] = None
    driver_id: Optional[DbInt] = Field(None, alias="driverId", examples=[1])
    start_date_time: Optional[datetime] = Field(
        None, alias="startDateTime", examples=["2025-09-01T09:00:00+02:00"]
    )
    flexible_start_place: Optional[DbInt] = Field(None, alias="flexibleStartPlace")
    flexible_end_place: Optional[DbInt] = Field(None, alias="flexibleEndPlace")
    price: Optional[float] = Field(None, examples=[10.0])
    number_of_seats: Optional[int] = Field(
        None, alias="numberOfSeats", ge=1, le=7, description="Seats offered, between 1 and 7"
    )
    description: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    # Stored and returned as-is; no read path filters on it.
    deleted: Optional[bool] = None
    start_place: Optional[Place] = Field(None, alias="startPlace")
    end_place: Optional[Place] = Field(None, alias="endPlace")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("start_date_time", "created_at")
    @classmethod
    def ensure_offset(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_aware(v)
