"""
FastAPI dependencies building the per-request object graph.

Each request gets its own SQLite connection from ``core.db.get_db``;
repositories and services are constructed around it here so that
endpoint functions only receive the service they need.
"""

import sqlite3

from fastapi import Depends

from flight_booking_api.app.core.db import get_db
from flight_booking_api.app.repositories import (
    BookingRepository,
    CustomerRepository,
    FlightRepository,
)
from flight_booking_api.app.services.booking_service import BookingService
from flight_booking_api.app.services.customer_service import CustomerService
from flight_booking_api.app.services.flight_service import FlightService


def get_flight_service(conn: sqlite3.Connection = Depends(get_db)) -> FlightService:
    return FlightService(FlightRepository(conn))


def get_customer_service(conn: sqlite3.Connection = Depends(get_db)) -> CustomerService:
    return CustomerService(CustomerRepository(conn))


def get_booking_service(conn: sqlite3.Connection = Depends(get_db)) -> BookingService:
    return BookingService(
        BookingRepository(conn),
        customers=CustomerRepository(conn),
        flights=FlightRepository(conn),
    )
