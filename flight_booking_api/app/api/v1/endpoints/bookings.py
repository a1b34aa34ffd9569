"""
Booking endpoints for API v1.

A booking is created for an existing customer and an existing flight.
Unknown references are answered with 404 naming the offending field;
a second booking of the same customer on the same flight and date with
409.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from flight_booking_api.app.api.v1.dependencies import get_booking_service
from flight_booking_api.app.core.db import MAX_ROW_ID
from flight_booking_api.app.schemas.booking import BookingCreate, BookingRead
from flight_booking_api.app.services.booking_service import BookingService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[BookingRead])
async def retrieve_all_bookings(
    customer_id: Optional[int] = Query(None, alias="customerId", ge=0, le=MAX_ROW_ID),
    flight_id: Optional[int] = Query(None, alias="flightId", ge=0, le=MAX_ROW_ID),
    service: BookingService = Depends(get_booking_service),
) -> List[BookingRead]:
    """List bookings ordered by date.

    - **customerId**: only bookings of this customer.
    - **flightId**: only bookings on this flight.
    """
    return await service.find_all(customer_id=customer_id, flight_id=flight_id)


@router.get("/{booking_id}", response_model=BookingRead)
async def retrieve_booking_by_id(
    booking_id: int = Path(..., ge=0, le=MAX_ROW_ID, description="Id of the booking"),
    service: BookingService = Depends(get_booking_service),
) -> BookingRead:
    return await service.find_by_id(booking_id)


@router.post(
    "",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid Booking supplied in request body"},
        404: {"description": "Referenced Customer or Flight not found"},
        409: {"description": "Booking conflicts with an existing Booking"},
    },
)
async def create_booking(
    booking: BookingCreate,
    service: BookingService = Depends(get_booking_service),
) -> BookingRead:
    created = await service.create(booking)
    logger.info("createBooking completed. Booking = %s", created.id)
    return created


@router.delete(
    "/{booking_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_booking(
    booking_id: int = Path(..., ge=0, le=MAX_ROW_ID, description="Id of the booking to be deleted"),
    service: BookingService = Depends(get_booking_service),
) -> Response:
    """Cancel a booking."""
    await service.delete(booking_id)
    logger.info("deleteBooking completed. Booking = %s", booking_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
