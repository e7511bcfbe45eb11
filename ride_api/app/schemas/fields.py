"""
Field types shared by the entity models.
"""

from typing import Annotated

from pydantic import Field

# SQLite stores integers as signed 64-bit values.
SQLITE_MIN_INT = -(2**63)
SQLITE_MAX_INT = 2**63 - 1

DbInt = Annotated[int, Field(ge=SQLITE_MIN_INT, le=SQLITE_MAX_INT)]
