"""
Application package initializer.

The package is organised in layers: ``schemas`` describe the wire
shape of each entity, ``repositories`` talk to the SQLite store,
``services`` hold the business rules and ``api/v1/endpoints`` expose
them over HTTP.  ``core`` holds configuration, logging, the database
and the domain exceptions.
"""

from .main import app  # noqa: F401
