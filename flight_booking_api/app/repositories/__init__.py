"""
Repository layer.

Repositories translate domain operations into parameterized SQL
against the SQLite store.  Each repository is bound to the connection
of a single request and should only be used by its service.
"""

from .booking_repository import BookingRepository
from .customer_repository import CustomerRepository
from .flight_repository import FlightRepository

__all__ = ["BookingRepository", "CustomerRepository", "FlightRepository"]
