"""
Flight endpoints for API v1.

The full path for the endpoints defined here is ``/api/flights``.
Handlers only translate between HTTP and ``FlightService``; rejections
raised by the service are rendered by the application's exception
handlers (400 for invalid or self-conflicting flights, 409 for a taken
flight number, 404 for unknown ids).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from flight_booking_api.app.api.v1.dependencies import get_flight_service
from flight_booking_api.app.core.db import MAX_ROW_ID
from flight_booking_api.app.schemas.flight import FlightCreate, FlightRead
from flight_booking_api.app.services.flight_service import FlightService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[FlightRead])
async def retrieve_all_flights(
    service: FlightService = Depends(get_flight_service),
) -> List[FlightRead]:
    """Return all flights, sorted by flight number."""
    return await service.find_all_ordered_by_number()


@router.get("/number/{number}", response_model=FlightRead)
async def retrieve_flight_by_number(
    number: str = Path(..., description="Flight number"),
    service: FlightService = Depends(get_flight_service),
) -> FlightRead:
    return await service.find_by_number(number)


@router.get("/{flight_id}", response_model=FlightRead)
async def retrieve_flight_by_id(
    flight_id: int = Path(..., ge=0, le=MAX_ROW_ID, description="Id of the flight"),
    service: FlightService = Depends(get_flight_service),
) -> FlightRead:
    return await service.find_by_id(flight_id)


@router.post(
    "",
    response_model=FlightRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid Flight supplied in request body"},
        409: {"description": "Flight supplied in request body conflicts with an existing Flight"},
    },
)
async def create_flight(
    flight: FlightCreate,
    service: FlightService = Depends(get_flight_service),
) -> FlightRead:
    """Create a new flight.

    Returns 201 with the stored flight, including its generated ``id``.
    A flight whose destination equals its point of departure is rejected
    with 400; a flight number that is already taken with 409.
    """
    created = await service.create(flight)
    logger.info("createFlight completed. Flight = %s", created.number)
    return created


@router.delete(
    "/{flight_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Flight with id not found"}},
)
async def delete_flight(
    flight_id: int = Path(..., ge=0, le=MAX_ROW_ID, description="Id of the flight to be deleted"),
    service: FlightService = Depends(get_flight_service),
) -> Response:
    """Delete a flight and, with it, every booking on that flight."""
    flight = await service.delete(flight_id)
    logger.info("deleteFlight completed. Flight = %s", flight.number)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
