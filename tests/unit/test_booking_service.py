"""Unit tests for BookingService."""

from datetime import timedelta
from unittest.mock import patch

import pytest

from flight_booking_api.app.core.errors import DuplicateKeyError, NotFoundError
from flight_booking_api.app.schemas.booking import BookingCreate
from flight_booking_api.app.schemas.customer import CustomerCreate
from flight_booking_api.app.schemas.flight import FlightCreate
from flight_booking_api.app.services.booking_service import BookingService


@pytest.fixture
def service(booking_repository, customer_repository, flight_repository):
    return BookingService(booking_repository, customer_repository, flight_repository)


@pytest.fixture
def customer(customer_repository):
    return customer_repository.create(
        CustomerCreate(name="Jane Doe", email="jane@example.com", phone_number="01912223333")
    )


@pytest.fixture
def flight(flight_repository):
    return flight_repository.create(
        FlightCreate(number="AB123", point_of_departure="LHR", destination="JFK")
    )


@pytest.mark.asyncio
async def test_create_booking(service, customer, flight, future_date):
    created = await service.create(
        BookingCreate(customer_id=customer.id, flight_id=flight.id, booking_date=future_date)
    )

    assert created.id is not None
    assert created.booking_date == future_date
    assert (await service.find_by_id(created.id)) == created


@pytest.mark.asyncio
async def test_unknown_customer_is_reported_on_customer_field(service, flight, future_date, count_rows):
    with pytest.raises(NotFoundError) as exc_info:
        await service.create(
            BookingCreate(customer_id=999, flight_id=flight.id, booking_date=future_date)
        )

    assert exc_info.value.fields == ["customerId"]
    assert count_rows("bookings") == 0


@pytest.mark.asyncio
async def test_unknown_flight_is_reported_on_flight_field(service, customer, future_date):
    with pytest.raises(NotFoundError) as exc_info:
        await service.create(
            BookingCreate(customer_id=customer.id, flight_id=999, booking_date=future_date)
        )

    assert exc_info.value.fields == ["flightId"]


@pytest.mark.asyncio
async def test_duplicate_booking_is_rejected(service, customer, flight, future_date, count_rows):
    booking = BookingCreate(customer_id=customer.id, flight_id=flight.id, booking_date=future_date)
    await service.create(booking)

    with pytest.raises(DuplicateKeyError) as exc_info:
        await service.create(booking)

    assert set(exc_info.value.fields) == {"customerId", "flightId", "date"}
    assert count_rows("bookings") == 1


@pytest.mark.asyncio
async def test_same_flight_on_another_date_is_allowed(service, customer, flight, future_date):
    await service.create(
        BookingCreate(customer_id=customer.id, flight_id=flight.id, booking_date=future_date)
    )
    await service.create(
        BookingCreate(
            customer_id=customer.id,
            flight_id=flight.id,
            booking_date=future_date + timedelta(days=1),
        )
    )

    assert len(await service.find_all(customer_id=customer.id)) == 2


def test_store_constraint_catches_duplicate_booking(booking_repository, customer, flight, future_date):
    booking = BookingCreate(customer_id=customer.id, flight_id=flight.id, booking_date=future_date)
    booking_repository.create(booking)

    with pytest.raises(DuplicateKeyError):
        booking_repository.create(booking)


def test_store_rejects_booking_for_missing_flight(booking_repository, customer, future_date):
    with pytest.raises(NotFoundError):
        booking_repository.create(
            BookingCreate(customer_id=customer.id, flight_id=404, booking_date=future_date)
        )


@pytest.mark.asyncio
async def test_listing_filters_and_orders_by_date(
    service, customer, flight, flight_repository, future_date
):
    other = flight_repository.create(
        FlightCreate(number="CD456", point_of_departure="CDG", destination="AMS")
    )
    later = future_date + timedelta(days=5)
    await service.create(BookingCreate(customer_id=customer.id, flight_id=flight.id, booking_date=later))
    await service.create(BookingCreate(customer_id=customer.id, flight_id=other.id, booking_date=future_date))

    everything = await service.find_all()
    on_flight = await service.find_all(flight_id=flight.id)

    assert [b.booking_date for b in everything] == [future_date, later]
    assert [b.flight_id for b in on_flight] == [flight.id]


@pytest.mark.asyncio
async def test_delete_booking(service, customer, flight, future_date, count_rows):
    created = await service.create(
        BookingCreate(customer_id=customer.id, flight_id=flight.id, booking_date=future_date)
    )

    await service.delete(created.id)

    assert count_rows("bookings") == 0
    with pytest.raises(NotFoundError):
        await service.delete(created.id)


@pytest.fixture
def two_customers_on_two_flights(service, customer, flight, customer_repository, flight_repository, future_date):
    """Book customer and a second customer on flight and a second flight."""
    other_customer = customer_repository.create(
        CustomerCreate(name="John Roe", email="john@example.com", phone_number="01712223333")
    )
    other_flight = flight_repository.create(
        FlightCreate(number="EF789", point_of_departure="MAD", destination="FCO")
    )
    for c in (customer, other_customer):
        for f in (flight, other_flight):
            service.repository.create(
                BookingCreate(customer_id=c.id, flight_id=f.id, booking_date=future_date)
            )
    return other_customer, other_flight


@pytest.mark.asyncio
async def test_customer_filter_uses_find_by_customer(
    service, booking_repository, customer, two_customers_on_two_flights
):
    with patch.object(
        booking_repository, "find_by_customer", wraps=booking_repository.find_by_customer
    ) as find_by_customer:
        bookings = await service.find_all(customer_id=customer.id)

    find_by_customer.assert_called_once_with(customer.id)
    assert len(bookings) == 2
    assert {b.customer_id for b in bookings} == {customer.id}


@pytest.mark.asyncio
async def test_flight_filter_uses_find_by_flight(
    service, booking_repository, two_customers_on_two_flights
):
    _, other_flight = two_customers_on_two_flights

    with patch.object(
        booking_repository, "find_by_flight", wraps=booking_repository.find_by_flight
    ) as find_by_flight:
        bookings = await service.find_all(flight_id=other_flight.id)

    find_by_flight.assert_called_once_with(other_flight.id)
    assert len(bookings) == 2
    assert {b.flight_id for b in bookings} == {other_flight.id}


@pytest.mark.asyncio
async def test_both_filters_are_combined(service, customer, two_customers_on_two_flights):
    _, other_flight = two_customers_on_two_flights

    bookings = await service.find_all(customer_id=customer.id, flight_id=other_flight.id)

    assert [(b.customer_id, b.flight_id) for b in bookings] == [(customer.id, other_flight.id)]


def test_repository_lookups_by_customer_and_flight(
    booking_repository, customer, flight, two_customers_on_two_flights
):
    other_customer, other_flight = two_customers_on_two_flights

    assert {b.flight_id for b in booking_repository.find_by_customer(other_customer.id)} == {
        flight.id,
        other_flight.id,
    }
    assert {b.customer_id for b in booking_repository.find_by_flight(flight.id)} == {
        customer.id,
        other_customer.id,
    }
    assert booking_repository.find_by_customer(9999) == []
