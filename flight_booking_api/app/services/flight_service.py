"""
Business logic for flights.

``FlightService`` runs the create workflow for flights: the route must
connect two different airports and the flight number must not be taken
yet.  Checks run in that order and the first failing one is reported;
nothing is written until all of them pass.
"""

import logging
from typing import List

from ..core.errors import DuplicateKeyError, NotFoundError, SelfConflictError
from ..repositories.flight_repository import (
    DUPLICATE_NUMBER_MESSAGE,
    SAME_DESTINATION_MESSAGE,
    FlightRepository,
)
from ..schemas.flight import FlightCreate, FlightRead


logger = logging.getLogger(__name__)


class FlightService:
    """Service for managing flights."""

    def __init__(self, repository: FlightRepository) -> None:
        self.repository = repository

    async def find_all_ordered_by_number(self) -> List[FlightRead]:
        return self.repository.find_all()

    async def find_by_id(self, flight_id: int) -> FlightRead:
        """Return a flight by id or raise ``NotFoundError``."""
        flight = self.repository.find_by_id(flight_id)
        if flight is None:
            raise NotFoundError(
                f"No Flight with the id {flight_id} was found!",
                {"error": f"No Flight with the id {flight_id} was found!"},
            )
        return flight

    async def find_by_number(self, number: str) -> FlightRead:
        flight = self.repository.find_by_number(number)
        if flight is None:
            raise NotFoundError(
                f"No Flight with the number {number} was found!",
                {"error": f"No Flight with the number {number} was found!"},
            )
        return flight

    def validate(self, flight: FlightCreate) -> None:
        """Apply the business rules to a shape-validated flight.

        Raises
        ------
        SelfConflictError
            If the destination equals the point of departure.
        DuplicateKeyError
            If a flight with the same number is already stored.
        """
        if flight.destination == flight.point_of_departure:
            raise SelfConflictError(
                "Destination equals point of departure",
                {"destination": SAME_DESTINATION_MESSAGE},
            )
        if self.repository.find_by_number(flight.number) is not None:
            raise DuplicateKeyError(
                "Flight number already exists", {"number": DUPLICATE_NUMBER_MESSAGE}
            )

    async def create(self, flight: FlightCreate) -> FlightRead:
        """Validate and persist a new flight.

        The uniqueness lookup and the insert are not atomic; a concurrent
        insert of the same number is caught by the store's constraint and
        raised by the repository as the same ``DuplicateKeyError``.
        """
        logger.info("FlightService.create() - Creating flight %s", flight.number)
        try:
            self.validate(flight)
        except (SelfConflictError, DuplicateKeyError) as e:
            logger.info("Flight %s rejected: %s (%s)", flight.number, e.message, e.kind.value)
            raise
        return self.repository.create(flight)

    async def delete(self, flight_id: int) -> FlightRead:
        """Delete a flight and its bookings; raise ``NotFoundError`` if absent."""
        flight = await self.find_by_id(flight_id)
        self.repository.delete(flight)
        return flight
