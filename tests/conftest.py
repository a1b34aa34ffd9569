"""Global pytest configuration and fixtures for all tests."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from flight_booking_api.app.core.config import settings
from flight_booking_api.app.core.db import get_connection, init_db
from flight_booking_api.app.main import create_app
from flight_booking_api.app.repositories import (
    BookingRepository,
    CustomerRepository,
    FlightRepository,
)


@pytest.fixture
def database(tmp_path, monkeypatch):
    """
    Point the application at a fresh SQLite file and migrate it.

    Every test gets its own database under ``tmp_path`` so tests never
    see each other's rows.
    """
    db_path = tmp_path / "flight_booking_test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def conn(database):
    """Open connection to the test database."""
    connection = get_connection()
    yield connection
    connection.close()


@pytest.fixture
def flight_repository(conn):
    return FlightRepository(conn)


@pytest.fixture
def customer_repository(conn):
    return CustomerRepository(conn)


@pytest.fixture
def booking_repository(conn):
    return BookingRepository(conn)


@pytest.fixture
def client(database):
    """Create test client; entering it runs the startup migrations."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def future_date():
    return date.today() + timedelta(days=30)


@pytest.fixture
def count_rows(conn):
    """Return a helper counting rows of a table, optionally with a WHERE clause."""

    def _count(table: str, where: str = "", params: tuple = ()) -> int:
        query = f"SELECT COUNT(*) AS total FROM {table}"
        if where:
            query += f" WHERE {where}"
        return conn.execute(query, params).fetchone()["total"]

    return _count
