"""
Storage access for flights.

``FlightRepository`` owns every SQL statement touching the ``flights``
table.  It is constructed with the connection of the current request
and is only meant to be used by ``FlightService``.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.errors import DuplicateKeyError, SelfConflictError
from ..schemas.flight import FlightCreate, FlightRead


logger = logging.getLogger(__name__)

DUPLICATE_NUMBER_MESSAGE = "The Flight number already exists in system"
SAME_DESTINATION_MESSAGE = "The destination is same with point of departure"

_COLUMNS = "id, number, point_of_departure, destination"


def _to_flight(row: sqlite3.Row) -> FlightRead:
    return FlightRead(
        id=row["id"],
        number=row["number"],
        point_of_departure=row["point_of_departure"],
        destination=row["destination"],
    )


class FlightRepository:
    """Repository for :class:`FlightRead` records."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def find_all(self) -> List[FlightRead]:
        """Return all flights sorted by flight number."""
        rows = self.conn.execute(
            f"SELECT {_COLUMNS} FROM flights ORDER BY number ASC"
        ).fetchall()
        return [_to_flight(row) for row in rows]

    def find_by_id(self, flight_id: int) -> Optional[FlightRead]:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM flights WHERE id = ?", (flight_id,)
        ).fetchone()
        return _to_flight(row) if row else None

    def find_by_number(self, number: str) -> Optional[FlightRead]:
        """Return the first flight with the given number, or ``None``."""
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM flights WHERE number = ? ORDER BY id LIMIT 1",
            (number,),
        ).fetchone()
        return _to_flight(row) if row else None

    def create(self, flight: FlightCreate) -> FlightRead:
        """Insert a flight and return it with its generated id.

        The table carries a ``UNIQUE`` constraint on ``number`` and a
        ``CHECK`` on the route; violations are reported as the same
        domain errors the service raises for its own checks.
        """
        logger.info("FlightRepository.create() - Creating %s", flight.number)
        try:
            cursor = self.conn.execute(
                """
                INSERT INTO flights (number, point_of_departure, destination)
                VALUES (?, ?, ?)
                """,
                (flight.number, flight.point_of_departure, flight.destination),
            )
            self.conn.commit()
        except sqlite3.IntegrityError as e:
            self.conn.rollback()
            if "UNIQUE" in str(e):
                raise DuplicateKeyError(
                    "Flight number already exists", {"number": DUPLICATE_NUMBER_MESSAGE}
                ) from e
            if "CHECK" in str(e):
                raise SelfConflictError(
                    "Destination equals point of departure",
                    {"destination": SAME_DESTINATION_MESSAGE},
                ) from e
            raise
        return FlightRead(id=cursor.lastrowid, **flight.model_dump())

    def delete(self, flight):
        """Delete a flight together with all of its bookings.

        Both statements run in a single transaction.  A flight without an
        id has never been stored, so nothing is deleted.
        """
        flight_id = getattr(flight, "id", None)
        if flight_id is None:
            logger.info("FlightRepository.delete() - No ID was found so can't Delete.")
            return flight

        logger.info("FlightRepository.delete() - Deleting %s", flight_id)
        try:
            removed = self.conn.execute(
                "DELETE FROM bookings WHERE flight_id = ?", (flight_id,)
            ).rowcount
            self.conn.execute("DELETE FROM flights WHERE id = ?", (flight_id,))
            self.conn.commit()
        except sqlite3.Error:
            self.conn.rollback()
            raise
        logger.debug("Removed %s booking(s) of flight %s", removed, flight_id)
        return flight
