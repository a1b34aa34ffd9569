"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a per-request FastAPI dependency (``get_db``)
and applying migrations on application start (``init_db``).

Every natural key is backed by a ``UNIQUE`` constraint so that the
store itself rejects duplicates that slip past the service-level
checks.  The migration mechanism stores applied migration versions in
the ``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


logger = logging.getLogger(__name__)

# Largest value an SQLite INTEGER column (and so a row id) can hold.
MAX_ROW_ID = 2**63 - 1


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS customers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone_number TEXT NOT NULL,
            CONSTRAINT uq_customers_email UNIQUE (email)
        );

        CREATE TABLE IF NOT EXISTS flights (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            number TEXT NOT NULL,
            point_of_departure TEXT NOT NULL,
            destination TEXT NOT NULL,
            CONSTRAINT uq_flights_number UNIQUE (number),
            CONSTRAINT ck_flights_route CHECK (destination <> point_of_departure)
        );

        CREATE TABLE IF NOT EXISTS bookings (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            customer_id INTEGER NOT NULL,
            flight_id INTEGER NOT NULL,
            booking_date DATE NOT NULL,
            FOREIGN KEY(customer_id) REFERENCES customers(id),
            FOREIGN KEY(flight_id) REFERENCES flights(id),
            CONSTRAINT uq_bookings_customer_flight_date UNIQUE (customer_id, flight_id, booking_date)
        );
        """,
    ),
    # Migration 2: indices for the ordered listings and cascade lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_customers_name ON customers(name);
        CREATE INDEX IF NOT EXISTS idx_bookings_flight_id ON bookings(flight_id);
        CREATE INDEX IF NOT EXISTS idx_bookings_booking_date ON bookings(booking_date);
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
    base_dir = Path(__file__).resolve().parent.parent.parent  # flight_booking_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects keyed by column name
    and foreign key enforcement is switched on for the lifetime of the
    connection (SQLite disables it by default).
    """
    db_path = get_database_path()
    # A connection is scoped to one request, but FastAPI may open it in
    # a worker thread and use it on the event loop thread.
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def get_db() -> Iterator[sqlite3.Connection]:
    """FastAPI dependency providing one connection per request.

    The connection is closed once the response has been produced.  Any
    transaction left open by a failed request is rolled back by
    ``close``.
    """
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  To add a migration, append it with an incremented
    version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying database migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
