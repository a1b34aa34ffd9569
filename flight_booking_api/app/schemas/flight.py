"""
Pydantic models for flight data.

``FlightCreate`` describes the request body of ``POST /flights`` and
enforces the field constraints that are part of the wire contract.
Fields are declared optional so that a missing value is reported with
its own message instead of pydantic's generic "Field required".
``FlightRead`` is the response shape and always includes the
generated ``id``.

JSON uses camelCase names (``pointOfDeparture``); Python code uses the
snake_case attribute names.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator


FLIGHT_NUMBER_PATTERN = re.compile(r"[A-Za-z0-9]{5}")
AIRPORT_CODE_PATTERN = re.compile(r"[A-Z]{3}")


class FlightCreate(BaseModel):
    """Schema for creating a flight."""

    number: Optional[str] = Field(None, examples=["AB123"], validate_default=True)
    point_of_departure: Optional[str] = Field(
        None, alias="pointOfDeparture", examples=["LHR"], validate_default=True
    )
    destination: Optional[str] = Field(None, examples=["JFK"], validate_default=True)

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("number")
    @classmethod
    def validate_number(cls, v: Optional[str]) -> str:
        """Flight number: 5 alphanumeric characters."""
        if v is None:
            raise ValueError("Flight Number could not be empty")
        if not FLIGHT_NUMBER_PATTERN.fullmatch(v):
            raise ValueError(
                "Please use a non-empty alpha-numerical string which is 5 characters in length"
            )
        return v

    @field_validator("point_of_departure")
    @classmethod
    def validate_point_of_departure(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Point Of Departure could not be empty")
        if not AIRPORT_CODE_PATTERN.fullmatch(v):
            raise ValueError(
                "Please use a non-empty alphabetical string, which is upper case and 3 characters in length"
            )
        return v

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: Optional[str]) -> str:
        # Comparison with the point of departure is a business rule and
        # is checked by FlightService, after shape validation.
        if v is None:
            raise ValueError("Destination could not be empty")
        if not AIRPORT_CODE_PATTERN.fullmatch(v):
            raise ValueError(
                "Please use a non-empty alphabetical string, which is upper case, "
                "3 characters in length and different from its point of departure"
            )
        return v


class FlightRead(BaseModel):
    """Schema for reading a flight from the API."""

    id: int
    number: str
    point_of_departure: str = Field(..., alias="pointOfDeparture")
    destination: str

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
