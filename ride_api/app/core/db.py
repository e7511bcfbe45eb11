"""
SQLite database integration and simple migration system.

This module provides ``get_connection`` for opening a connection,
the ``transaction`` context manager used by the service layer as its
transaction boundary, and ``init_db`` which applies migrations on
application start.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS car (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER,
            brand TEXT,
            model TEXT,
            color TEXT
        );

        CREATE TABLE IF NOT EXISTS place (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            latitude REAL,
            longitude REAL,
            postcode INTEGER,
            city_name TEXT
        );

        -- start and end place are one-to-one with place
        CREATE TABLE IF NOT EXISTS ride (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            driver_id INTEGER,
            start_date_time TIMESTAMP,
            flexible_start_place INTEGER,
            flexible_end_place INTEGER,
            price REAL,
            number_of_seats INTEGER CHECK (number_of_seats BETWEEN 1 AND 7),
            description TEXT,
            created_at TIMESTAMP,
            deleted INTEGER,
            start_place_id INTEGER UNIQUE,
            end_place_id INTEGER UNIQUE,
            FOREIGN KEY(start_place_id) REFERENCES place(id),
            FOREIGN KEY(end_place_id) REFERENCES place(id)
        );

        CREATE TABLE IF NOT EXISTS reservation (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            passenger_id INTEGER,
            confirmed INTEGER,
            cancled INTEGER,
            ride_id INTEGER,
            FOREIGN KEY(ride_id) REFERENCES ride(id)
        );
        """,
    ),
    # Migration 2: reservations are looked up by ride
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_reservation_ride_id ON reservation(ride_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # ride_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite disables it by default.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def transaction(read_only: bool = False) -> Iterator[sqlite3.Connection]:
    """Open a connection scoped to a single unit of work.

    Changes are committed when the block exits normally.  They are
    rolled back if the block raises, or unconditionally when
    ``read_only`` is set.  The connection is always closed.
    """
    conn = get_connection()
    try:
        yield conn
        if read_only:
            conn.rollback()
        else:
            conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  New migrations must be appended with an
    incremented version number.
    """
    with transaction() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
