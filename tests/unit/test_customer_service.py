"""Unit tests for CustomerService."""

import pytest

from flight_booking_api.app.core.errors import DuplicateKeyError, NotFoundError
from flight_booking_api.app.schemas.booking import BookingCreate
from flight_booking_api.app.schemas.customer import CustomerCreate
from flight_booking_api.app.schemas.flight import FlightCreate
from flight_booking_api.app.services.customer_service import CustomerService


def make_customer(name="Jane Doe", email="jane@example.com") -> CustomerCreate:
    return CustomerCreate(name=name, email=email, phone_number="01912223333")


@pytest.fixture
def service(customer_repository):
    return CustomerService(customer_repository)


@pytest.mark.asyncio
async def test_create_and_find_by_email(service):
    created = await service.create(make_customer())

    found = await service.find_by_email("jane@example.com")

    assert found == created
    assert found.phone_number == "01912223333"


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(service, count_rows):
    await service.create(make_customer())

    with pytest.raises(DuplicateKeyError) as exc_info:
        await service.create(make_customer(name="John Doe"))

    assert exc_info.value.fields == ["email"]
    assert count_rows("customers") == 1


@pytest.mark.asyncio
async def test_listing_is_ordered_by_name(service):
    await service.create(make_customer(name="Zoe", email="zoe@example.com"))
    await service.create(make_customer(name="Adam", email="adam@example.com"))
    await service.create(make_customer(name="Mia", email="mia@example.com"))

    customers = await service.find_all_ordered_by_name()

    assert [c.name for c in customers] == ["Adam", "Mia", "Zoe"]


@pytest.mark.asyncio
async def test_unknown_customer_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.find_by_id(42)
    with pytest.raises(NotFoundError):
        await service.find_by_email("nobody@example.com")


@pytest.mark.asyncio
async def test_delete_cascades_to_bookings(
    service, flight_repository, booking_repository, count_rows, future_date
):
    customer = await service.create(make_customer())
    other = await service.create(make_customer(name="John", email="john@example.com"))
    flight = flight_repository.create(
        FlightCreate(number="AB123", point_of_departure="LHR", destination="JFK")
    )
    for owner in (customer, other):
        booking_repository.create(
            BookingCreate(customer_id=owner.id, flight_id=flight.id, booking_date=future_date)
        )

    await service.delete(customer.id)

    assert count_rows("customers") == 1
    assert count_rows("bookings", "customer_id = ?", (customer.id,)) == 0
    assert count_rows("bookings", "customer_id = ?", (other.id,)) == 1
