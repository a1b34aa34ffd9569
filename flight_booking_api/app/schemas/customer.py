"""
Pydantic models for customer data.

``CustomerCreate`` validates the request body of ``POST /customers``;
``CustomerRead`` extends the stored fields with the generated ``id``.
E‑mail uniqueness is not a shape constraint and is enforced by
``CustomerService``.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator


NAME_PATTERN = re.compile(r"[A-Za-z' -]{1,50}")
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
PHONE_NUMBER_PATTERN = re.compile(r"0[0-9]{10}")


class CustomerCreate(BaseModel):
    """Schema for registering a customer."""

    name: Optional[str] = Field(None, examples=["Jane Doe"], validate_default=True)
    email: Optional[str] = Field(None, examples=["jane.doe@example.com"], validate_default=True)
    phone_number: Optional[str] = Field(
        None, alias="phoneNumber", examples=["01912223333"], validate_default=True
    )

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise ValueError("Customer name could not be empty")
        if not NAME_PATTERN.fullmatch(v):
            raise ValueError(
                "Please use a name made of letters, spaces, apostrophes and hyphens, at most 50 characters"
            )
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Email could not be empty")
        if not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("The email address must be in the format of name@domain")
        return v

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Phone number could not be empty")
        if not PHONE_NUMBER_PATTERN.fullmatch(v):
            raise ValueError("Please use a phone number starting with 0 followed by 10 digits")
        return v


class CustomerRead(BaseModel):
    """Schema for reading a customer from the API."""

    id: int
    name: str
    email: str
    phone_number: str = Field(..., alias="phoneNumber")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
