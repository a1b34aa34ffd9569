"""
Top‑level package for the Flight Booking API.

This file makes ``flight_booking_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``flight_booking_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
