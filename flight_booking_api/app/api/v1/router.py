"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers under a unified prefix.
When new entities are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import bookings, customers, flights, health

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(flights.router, prefix="/flights", tags=["flights"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(health.router, prefix="/health", tags=["health"])
