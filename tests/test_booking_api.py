"""
Тесты HTTP API бронирований.
"""

import pytest

from travel_booking.booking.infrastructure import SAMPLE_ACCOMMODATIONS

ACCOMMODATION_ID = SAMPLE_ACCOMMODATIONS[0].id


@pytest.fixture
def created(client, booking_payload):
    """Созданное бронирование, связанное с размещением из каталога."""
    payload = dict(booking_payload, accommodation=ACCOMMODATION_ID)
    response = client.post("/api/booking/create", json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_booking_returns_record(client, booking_payload):
    response = client.post("/api/booking/create", json=booking_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["_id"]
    assert body["accommodation"] == "acc1"
    assert body["packageType"] == "premium"
    assert body["numberOfTravellers"] == 3
    assert "createdAt" in body and "updatedAt" in body


def test_create_booking_applies_defaults_and_trims(client, booking_payload):
    del booking_payload["packageType"]
    booking_payload["specialNeeds"] = "  wheelchair access  "

    body = client.post("/api/booking/create", json=booking_payload).json()

    assert body["packageType"] == "normal"
    assert body["specialNeeds"] == "wheelchair access"


@pytest.mark.parametrize(
    "field, value",
    [
        ("packageType", "gold"),
        ("numberOfTravellers", 0),
        ("name", ""),
        ("emailAddress", None),
    ],
)
def test_invalid_booking_is_rejected(client, booking_payload, field, value):
    booking_payload[field] = value

    response = client.post("/api/booking/create", json=booking_payload)

    assert response.status_code == 400
    assert response.json()["message"] == "Error creating booking"
    assert "Booking validation failed" in response.json()["error"]
    assert client.get("/api/booking/book").json() == []


def test_list_bookings_joins_accommodation(client, created, booking_payload):
    client.post("/api/booking/create", json=booking_payload)

    bookings = client.get("/api/booking/book").json()

    assert len(bookings) == 2
    by_id = {booking["_id"]: booking for booking in bookings}
    assert by_id[created["_id"]]["accommodation"]["name"] == "Ella Mountain Lodge"
    unknown = [b for b in bookings if b["_id"] != created["_id"]][0]
    assert unknown["accommodation"] is None


@pytest.mark.parametrize("template", ["/api/booking/booking{}", "/api/booking/booking/{}"])
def test_get_booking_by_id(client, created, template):
    response = client.get(template.format(created["_id"]))

    assert response.status_code == 200
    assert response.json()["_id"] == created["_id"]
    assert response.json()["accommodation"]["_id"] == ACCOMMODATION_ID


def test_get_missing_booking(client):
    response = client.get("/api/booking/bookingdoesnotexist")

    assert response.status_code == 404
    assert response.json() == {"message": "Booking not found"}


@pytest.mark.parametrize("template", ["/api/booking/update{}", "/api/booking/update/{}"])
def test_update_booking(client, created, template):
    response = client.put(
        template.format(created["_id"]),
        json={"packageType": "vip", "numberOfTravellers": 5},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["packageType"] == "vip"
    assert body["numberOfTravellers"] == 5
    assert body["name"] == created["name"]
    assert body["createdAt"] == created["createdAt"]


def test_update_is_validated(client, created):
    response = client.put(
        f"/api/booking/update{created['_id']}", json={"numberOfTravellers": 0}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Error updating booking"

    stored = client.get(f"/api/booking/booking{created['_id']}").json()
    assert stored["numberOfTravellers"] == created["numberOfTravellers"]


def test_update_cannot_change_id(client, created):
    response = client.put(f"/api/booking/update{created['_id']}", json={"_id": "other"})

    assert response.json()["_id"] == created["_id"]


def test_update_missing_booking(client):
    response = client.put("/api/booking/updatenope", json={"name": "X"})

    assert response.status_code == 404


@pytest.mark.parametrize("template", ["/api/booking/delete{}", "/api/booking/delete/{}"])
def test_delete_booking(client, created, template):
    response = client.delete(template.format(created["_id"]))

    assert response.status_code == 200
    assert response.json() == {"message": "Booking deleted successfully"}
    assert client.get(f"/api/booking/booking{created['_id']}").status_code == 404


def test_delete_missing_booking(client):
    response = client.delete("/api/booking/deletenope")

    assert response.status_code == 404
    assert response.json() == {"message": "Booking not found"}


def test_booking_lifecycle_is_logged(client, created, logger):
    client.delete(f"/api/booking/delete{created['_id']}")

    assert "Booking created" in logger.messages("info")
    assert "Booking deleted" in logger.messages("info")
    assert "BookingUnitOfWork committed" in logger.messages("info")
    assert "Audit: booking created" in logger.messages("info")
    assert "Audit: booking deleted" in logger.messages("info")


def test_accommodation_catalogue(client):
    catalogue = client.get("/api/accommodations/").json()

    assert [item["_id"] for item in catalogue] == [a.id for a in SAMPLE_ACCOMMODATIONS]

    response = client.get(f"/api/accommodations/{ACCOMMODATION_ID}")
    assert response.json()["pricePerNight"] == 85.0

    assert client.get("/api/accommodations/missing").status_code == 404
