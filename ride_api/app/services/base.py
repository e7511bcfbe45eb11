"""
Transactional CRUD service shared by all entities.

Each call opens its own transaction through ``core.db.transaction``
and hands the connection to the repository.  Reads run in read-only
transactions.  No business rules are applied here.
"""

import logging
from typing import ClassVar, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from ..core.db import transaction
from ..repositories.base import SortOrder, SQLiteRepository

EntityT = TypeVar("EntityT", bound=BaseModel)


class CrudService(Generic[EntityT]):
    """Base class for the entity services.

    Subclasses set ``repository`` and ``entity_label`` (used in log
    messages, e.g. ``"Ride"``).
    """

    repository: ClassVar[SQLiteRepository]
    entity_label: ClassVar[str]

    @classmethod
    def _logger(cls) -> logging.Logger:
        return logging.getLogger(cls.__module__)

    @classmethod
    async def save(cls, entity: EntityT) -> EntityT:
        """Persist ``entity`` and return it with its id populated."""
        cls._logger().debug("Request to save %s : %s", cls.entity_label, entity)
        with transaction() as conn:
            return cls.repository.save(conn, entity)

    @classmethod
    async def find_all(cls, sort: Optional[SortOrder] = None) -> List[EntityT]:
        cls._logger().debug("Request to get all %ss", cls.entity_label)
        with transaction(read_only=True) as conn:
            return cls.repository.find_all(conn, sort=sort)

    @classmethod
    async def find_one(cls, entity_id: int) -> Optional[EntityT]:
        cls._logger().debug("Request to get %s : %s", cls.entity_label, entity_id)
        with transaction(read_only=True) as conn:
            return cls.repository.find_one(conn, entity_id)

    @classmethod
    async def delete(cls, entity_id: int) -> None:
        cls._logger().debug("Request to delete %s : %s", cls.entity_label, entity_id)
        with transaction() as conn:
            cls.repository.delete(conn, entity_id)
