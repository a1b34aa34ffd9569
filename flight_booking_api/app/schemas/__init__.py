"""
Pydantic schema definitions for API payloads.

Each entity (customers, flights, bookings) defines its own Pydantic
models for request and response bodies.  Schemas are separated from
the storage layer to decouple API representation from persistence.
"""
