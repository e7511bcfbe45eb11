"""Generic SQLite repository shared by all entities."""

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel

from ..schemas.fields import SQLITE_MAX_INT, SQLITE_MIN_INT

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

SortOrder = Sequence[Tuple[str, str]]


def to_db_value(value: Any) -> Any:
    """Convert a model attribute into a value SQLite can store.

    Date-times are stored in UTC so that text ordering is chronological.
    """
    if isinstance(value, datetime):
        return value.astimezone(timezone.utc).isoformat()
    if isinstance(value, bool):
        return int(value)
    return value


def is_storable_id(entity_id: int) -> bool:
    """Ids outside SQLite's integer range can never name a stored row."""
    return SQLITE_MIN_INT <= entity_id <= SQLITE_MAX_INT


class SQLiteRepository(Generic[EntityT]):
    """Persistence gateway for one table.

    Subclasses name the ``table``, the pydantic ``model`` and the
    ``columns`` mapping of model attributes to column names (``id`` is
    implicit).  References to other entities are passed to the
    constructor as ``{attribute: (column, repository)}``; only the
    referenced id is stored and the full entity is loaded on read.

    Every method takes the connection of the caller's transaction.
    """

    table: str
    model: Type[EntityT]
    columns: Dict[str, str] = {}

    def __init__(self, references: Optional[Dict[str, Tuple[str, "SQLiteRepository"]]] = None):
        self.references = references or {}

    def save(self, conn: sqlite3.Connection, entity: EntityT) -> EntityT:
        """Insert ``entity`` or, if it carries an id, upsert it.

        Returns the stored row with its references resolved.
        """
        row = self._to_row(entity)
        columns = list(row)
        placeholders = ", ".join("?" for _ in columns)
        if entity.id is None:
            cursor = conn.execute(
                f"INSERT INTO {self.table} ({', '.join(columns)}) VALUES ({placeholders})",
                tuple(row.values()),
            )
            entity_id = cursor.lastrowid
        else:
            assignments = ", ".join(f"{column} = excluded.{column}" for column in columns)
            conn.execute(
                f"""
                INSERT INTO {self.table} (id, {', '.join(columns)})
                VALUES (?, {placeholders})
                ON CONFLICT(id) DO UPDATE SET {assignments}
                """,
                (entity.id, *row.values()),
            )
            entity_id = entity.id
        logger.debug("Saved %s %s", self.table, entity_id)
        return self.find_one(conn, entity_id)

    def find_all(self, conn: sqlite3.Connection, sort: Optional[SortOrder] = None) -> List[EntityT]:
        """Return every row, ordered only if ``sort`` is given.

        ``sort`` is a sequence of ``(field, direction)`` pairs.  Fields
        may be given by JSON name or attribute name; unknown fields are
        ignored and any direction other than ``desc`` sorts ascending.
        """
        query = f"SELECT * FROM {self.table}"
        order_by = self._order_by(sort or ())
        if order_by:
            query += f" ORDER BY {order_by}"
        rows = conn.execute(query).fetchall()
        return [self._from_row(conn, row) for row in rows]

    def find_one(self, conn: sqlite3.Connection, entity_id: int) -> Optional[EntityT]:
        if not is_storable_id(entity_id):
            return None
        row = conn.execute(
            f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,)
        ).fetchone()
        if not row:
            return None
        return self._from_row(conn, row)

    def delete(self, conn: sqlite3.Connection, entity_id: int) -> None:
        """Delete by id.  Deleting a missing id is not an error."""
        if not is_storable_id(entity_id):
            return
        conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))

    def _find_where(self, conn: sqlite3.Connection, column: str, value: Any) -> List[EntityT]:
        rows = conn.execute(
            f"SELECT * FROM {self.table} WHERE {column} = ? ORDER BY id", (value,)
        ).fetchall()
        return [self._from_row(conn, row) for row in rows]

    def _to_row(self, entity: EntityT) -> Dict[str, Any]:
        row = {column: to_db_value(getattr(entity, attr)) for attr, column in self.columns.items()}
        for attr, (column, _) in self.references.items():
            target = getattr(entity, attr)
            row[column] = target.id if target is not None else None
        return row

    def _from_row(self, conn: sqlite3.Connection, row: sqlite3.Row) -> EntityT:
        values: Dict[str, Any] = {"id": row["id"]}
        for attr, column in self.columns.items():
            values[attr] = row[column]
        for attr, (column, repository) in self.references.items():
            target_id = row[column]
            values[attr] = repository.find_one(conn, target_id) if target_id is not None else None
        return self.model.model_validate(values)

    def _sortable_columns(self) -> Dict[str, str]:
        """Map attribute names and JSON aliases to column names."""
        by_attr = {"id": "id", **self.columns}
        by_attr.update({attr: column for attr, (column, _) in self.references.items()})
        lookup = {}
        for attr, field in self.model.model_fields.items():
            if attr not in by_attr:
                continue
            lookup[attr] = by_attr[attr]
            if field.alias:
                lookup[field.alias] = by_attr[attr]
        return lookup

    def _order_by(self, sort: SortOrder) -> str:
        lookup = self._sortable_columns()
        clauses = []
        for field, direction in sort:
            column = lookup.get(field)
            if column is None:
                continue
            clauses.append(f"{column} {'DESC' if direction.lower() == 'desc' else 'ASC'}")
        return ", ".join(clauses)
