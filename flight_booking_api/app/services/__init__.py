"""
Service layer abstraction.

Each service encapsulates the business rules of one entity and
delegates storage to its repository.  Services raise the domain
exceptions from ``core.errors``; they never build HTTP responses.
"""
