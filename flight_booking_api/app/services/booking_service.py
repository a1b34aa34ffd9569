"""
Business logic for bookings.

The ``BookingService`` validates a booking against the rest of the
store before writing it:

1. the referenced customer must exist,
2. the referenced flight must exist,
3. the customer must not already hold a booking for the same flight
   on the same date.

The first failing check is reported.  Lookups and the insert are not a
single transaction, so the store's own ``UNIQUE`` and ``FOREIGN KEY``
constraints back up these checks against concurrent requests.
"""

import logging
from typing import List, Optional

from ..core.errors import DuplicateKeyError, NotFoundError
from ..repositories.booking_repository import BookingRepository, duplicate_booking_reasons
from ..repositories.customer_repository import CustomerRepository
from ..repositories.flight_repository import FlightRepository
from ..schemas.booking import BookingCreate, BookingRead


logger = logging.getLogger(__name__)


class BookingService:
    """Service for managing bookings."""

    def __init__(
        self,
        repository: BookingRepository,
        customers: CustomerRepository,
        flights: FlightRepository,
    ) -> None:
        self.repository = repository
        self.customers = customers
        self.flights = flights

    async def find_all(
        self,
        customer_id: Optional[int] = None,
        flight_id: Optional[int] = None,
    ) -> List[BookingRead]:
        """Return bookings ordered by date, optionally for one customer or flight."""
        if customer_id is not None and flight_id is not None:
            return self.repository.find_all(customer_id=customer_id, flight_id=flight_id)
        if customer_id is not None:
            return self.repository.find_by_customer(customer_id)
        if flight_id is not None:
            return self.repository.find_by_flight(flight_id)
        return self.repository.find_all()

    async def find_by_id(self, booking_id: int) -> BookingRead:
        booking = self.repository.find_by_id(booking_id)
        if booking is None:
            raise NotFoundError(
                f"No Booking with the id {booking_id} was found!",
                {"error": f"No Booking with the id {booking_id} was found!"},
            )
        return booking

    def validate(self, booking: BookingCreate) -> None:
        if self.customers.find_by_id(booking.customer_id) is None:
            raise NotFoundError(
                "Customer does not exist",
                {"customerId": f"No Customer with the id {booking.customer_id} was found!"},
            )
        if self.flights.find_by_id(booking.flight_id) is None:
            raise NotFoundError(
                "Flight does not exist",
                {"flightId": f"No Flight with the id {booking.flight_id} was found!"},
            )
        existing = self.repository.find_by_natural_key(
            booking.customer_id, booking.flight_id, booking.booking_date
        )
        if existing is not None:
            raise DuplicateKeyError("Booking already exists", duplicate_booking_reasons())

    async def create(self, booking: BookingCreate) -> BookingRead:
        logger.info(
            "BookingService.create() - Customer %s books flight %s for %s",
            booking.customer_id,
            booking.flight_id,
            booking.booking_date,
        )
        try:
            self.validate(booking)
        except (NotFoundError, DuplicateKeyError) as e:
            logger.info("Booking rejected: %s", e.message)
            raise
        return self.repository.create(booking)

    async def delete(self, booking_id: int) -> BookingRead:
        booking = await self.find_by_id(booking_id)
        self.repository.delete(booking)
        return booking
