"""
Shared request dependencies for the API routers.
"""

from typing import List, Optional, Tuple

from fastapi import Query


def sort_order(
    sort: Optional[List[str]] = Query(
        None,
        description="Sort criteria as `field,direction`, e.g. `id,desc`.  May be repeated.",
    ),
) -> List[Tuple[str, str]]:
    """Parse repeated ``sort=field,direction`` query parameters.

    The direction defaults to ``asc``.  Validation of field names is
    left to the repository, which ignores unknown fields.
    """
    order: List[Tuple[str, str]] = []
    for value in sort or []:
        field, _, direction = value.partition(",")
        field = field.strip()
        if field:
            order.append((field, direction.strip() or "asc"))
    return order
