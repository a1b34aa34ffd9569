"""
Storage access for bookings.

A booking is identified in business terms by the combination of
customer, flight and date; the ``bookings`` table enforces that
combination with a ``UNIQUE`` constraint.  Dates are stored as ISO
strings (``YYYY-MM-DD``), which keeps ``ORDER BY booking_date``
chronological.
"""

import logging
import sqlite3
from datetime import date
from typing import List, Optional

from ..core.errors import DuplicateKeyError, NotFoundError
from ..schemas.booking import BookingCreate, BookingRead


logger = logging.getLogger(__name__)

DUPLICATE_BOOKING_MESSAGE = "This customer already has a booking for this flight on this date"

_COLUMNS = "id, customer_id, flight_id, booking_date"


def _to_booking(row: sqlite3.Row) -> BookingRead:
    return BookingRead(
        id=row["id"],
        customer_id=row["customer_id"],
        flight_id=row["flight_id"],
        booking_date=row["booking_date"],
    )


def duplicate_booking_reasons() -> dict:
    return {
        "customerId": DUPLICATE_BOOKING_MESSAGE,
        "flightId": DUPLICATE_BOOKING_MESSAGE,
        "date": DUPLICATE_BOOKING_MESSAGE,
    }


class BookingRepository:
    """Repository for :class:`BookingRead` records."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def find_all(
        self,
        customer_id: Optional[int] = None,
        flight_id: Optional[int] = None,
    ) -> List[BookingRead]:
        """Return bookings ordered by date, optionally filtered.

        Filters are combined with ``AND``; omitted filters are ignored.
        """
        query = f"SELECT {_COLUMNS} FROM bookings"
        params: list = []
        where_clauses: list[str] = []
        if customer_id is not None:
            where_clauses.append("customer_id = ?")
            params.append(customer_id)
        if flight_id is not None:
            where_clauses.append("flight_id = ?")
            params.append(flight_id)
        if where_clauses:
            query += " WHERE " + " AND ".join(where_clauses)
        query += " ORDER BY booking_date ASC, id ASC"
        rows = self.conn.execute(query, tuple(params)).fetchall()
        return [_to_booking(row) for row in rows]

    def find_by_customer(self, customer_id: int) -> List[BookingRead]:
        return self.find_all(customer_id=customer_id)

    def find_by_flight(self, flight_id: int) -> List[BookingRead]:
        return self.find_all(flight_id=flight_id)

    def find_by_id(self, booking_id: int) -> Optional[BookingRead]:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM bookings WHERE id = ?", (booking_id,)
        ).fetchone()
        return _to_booking(row) if row else None

    def find_by_natural_key(
        self, customer_id: int, flight_id: int, booking_date: date
    ) -> Optional[BookingRead]:
        """Return the first booking of a customer on a flight for a date."""
        row = self.conn.execute(
            f"""
            SELECT {_COLUMNS} FROM bookings
            WHERE customer_id = ? AND flight_id = ? AND booking_date = ?
            ORDER BY id LIMIT 1
            """,
            (customer_id, flight_id, booking_date.isoformat()),
        ).fetchone()
        return _to_booking(row) if row else None

    def create(self, booking: BookingCreate) -> BookingRead:
        logger.info(
            "BookingRepository.create() - Creating booking of customer %s on flight %s for %s",
            booking.customer_id,
            booking.flight_id,
            booking.booking_date,
        )
        try:
            cursor = self.conn.execute(
                """
                INSERT INTO bookings (customer_id, flight_id, booking_date)
                VALUES (?, ?, ?)
                """,
                (booking.customer_id, booking.flight_id, booking.booking_date.isoformat()),
            )
            self.conn.commit()
        except sqlite3.IntegrityError as e:
            self.conn.rollback()
            if "UNIQUE" in str(e):
                raise DuplicateKeyError("Booking already exists", duplicate_booking_reasons()) from e
            if "FOREIGN KEY" in str(e):
                # The customer or flight was removed after it was looked up.
                raise NotFoundError(
                    "Referenced customer or flight no longer exists",
                    {
                        "customerId": "The customer or flight of this booking no longer exists",
                        "flightId": "The customer or flight of this booking no longer exists",
                    },
                ) from e
            raise
        return BookingRead(id=cursor.lastrowid, **booking.model_dump())

    def delete(self, booking):
        booking_id = getattr(booking, "id", None)
        if booking_id is None:
            logger.info("BookingRepository.delete() - No ID was found so can't Delete.")
            return booking

        logger.info("BookingRepository.delete() - Deleting %s", booking_id)
        try:
            self.conn.execute("DELETE FROM bookings WHERE id = ?", (booking_id,))
            self.conn.commit()
        except sqlite3.Error:
            self.conn.rollback()
            raise
        return booking
