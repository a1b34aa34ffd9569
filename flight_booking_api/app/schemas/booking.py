"""
Pydantic models for bookings.

A booking ties one customer to one flight on a given date.  The JSON
field ``date`` maps to the ``booking_date`` attribute so that the
``datetime.date`` type name is not shadowed inside the model.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.db import MAX_ROW_ID


class BookingCreate(BaseModel):
    """Schema for creating a booking.

    Only the shape is checked here.  Whether the referenced customer
    and flight exist, and whether the same booking was already made, is
    decided by ``BookingService``.
    """

    customer_id: Optional[int] = Field(None, alias="customerId", examples=[1], validate_default=True)
    flight_id: Optional[int] = Field(None, alias="flightId", examples=[1], validate_default=True)
    booking_date: Optional[date] = Field(None, alias="date", examples=["2030-01-31"], validate_default=True)

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("customer_id")
    @classmethod
    def validate_customer_id(cls, v: Optional[int]) -> int:
        if v is None:
            raise ValueError("Customer id could not be empty")
        if not 0 <= v <= MAX_ROW_ID:
            raise ValueError("Customer id must be a non-negative integer within the stored id range")
        return v

    @field_validator("flight_id")
    @classmethod
    def validate_flight_id(cls, v: Optional[int]) -> int:
        if v is None:
            raise ValueError("Flight id could not be empty")
        if not 0 <= v <= MAX_ROW_ID:
            raise ValueError("Flight id must be a non-negative integer within the stored id range")
        return v

    @field_validator("booking_date")
    @classmethod
    def validate_booking_date(cls, v: Optional[date]) -> date:
        """Bookings can only be made for today or a future date."""
        if v is None:
            raise ValueError("Booking date could not be empty")
        if v < date.today():
            raise ValueError("Booking date must be today or in the future")
        return v


class BookingRead(BaseModel):
    """Schema for reading a booking from the API."""

    id: int
    customer_id: int = Field(..., alias="customerId")
    flight_id: int = Field(..., alias="flightId")
    booking_date: date = Field(..., alias="date")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
