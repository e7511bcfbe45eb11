"""
Pydantic model for cars.

A car belongs to a user through ``userId``; the reference is not
enforced by the database.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .fields import DbInt


class Car(BaseModel):
    id: Optional[DbInt] = None
    user_id: Optional[DbInt] = Field(None, alias="userId", examples=[1])
    brand: Optional[str] = Field(None, examples=["Volkswagen"])
    model: Optional[str] = Field(None, examples=["Golf"])
    color: Optional[str] = Field(None, examples=["blue"])

    model_config = {
        "populate_by_name": True,
    }
