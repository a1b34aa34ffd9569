"""Integration tests for the customer endpoints."""

from fastapi import status


JANE = {"name": "Jane Doe", "email": "jane@example.com", "phoneNumber": "01912223333"}


def test_create_customer(client):
    response = client.post("/api/customers", json=JANE)

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["id"] >= 0
    assert body["phoneNumber"] == JANE["phoneNumber"]


def test_invalid_customer_returns_field_map(client):
    response = client.post(
        "/api/customers", json={"name": "Jane", "email": "jane", "phoneNumber": "12"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert set(response.json()) == {"email", "phoneNumber"}


def test_duplicate_email_returns_409(client, count_rows):
    client.post("/api/customers", json=JANE)

    response = client.post("/api/customers", json={**JANE, "name": "Janet Doe"})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert list(response.json()) == ["email"]
    assert count_rows("customers") == 1


def test_listing_sorted_by_name_and_lookups(client):
    client.post("/api/customers", json={**JANE, "name": "Zed", "email": "zed@example.com"})
    jane = client.post("/api/customers", json=JANE).json()

    names = [c["name"] for c in client.get("/api/customers").json()]

    assert names == ["Jane Doe", "Zed"]
    assert client.get(f"/api/customers/{jane['id']}").json() == jane
    assert client.get("/api/customers/email/jane@example.com").json() == jane
    assert client.get("/api/customers/email/x@example.com").status_code == status.HTTP_404_NOT_FOUND


def test_delete_customer_cascades(client, count_rows, future_date):
    jane = client.post("/api/customers", json=JANE).json()
    flight = client.post(
        "/api/flights", json={"number": "AB123", "pointOfDeparture": "LHR", "destination": "JFK"}
    ).json()
    client.post(
        "/api/bookings",
        json={"customerId": jane["id"], "flightId": flight["id"], "date": future_date.isoformat()},
    )

    response = client.delete(f"/api/customers/{jane['id']}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert count_rows("bookings") == 0
    assert count_rows("flights") == 1
    assert client.delete(f"/api/customers/{jane['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_phone_number_with_non_ascii_digits_returns_400(client, count_rows):
    response = client.post("/api/customers", json={**JANE, "phoneNumber": "0" + "١" * 10})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert list(response.json()) == ["phoneNumber"]
    assert count_rows("customers") == 0


def test_customer_ids_beyond_stored_range_return_400(client):
    assert client.get(f"/api/customers/{10**20}").status_code == status.HTTP_400_BAD_REQUEST
    assert client.delete(f"/api/customers/{10**20}").status_code == status.HTTP_400_BAD_REQUEST
