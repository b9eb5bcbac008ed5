import pytest
from fastapi.testclient import TestClient

from tidyhq.main import app


@pytest.fixture(autouse=True)
def setup_db():
    database = app.state.database
    database.drop_all()
    database.create_all()
    for limiter in app.state.rate_limiters.values():
        limiter.reset()
    yield
    database.drop_all()


@pytest.fixture
def client() -> TestClient:
    client = TestClient(app)
    response = client.post(
        "/api/register",
        json={
            "username": "owner",
            "email": "owner@example.com",
            "firstName": "Olive",
            "lastName": "Owner",
            "password": "Secret123!",
        },
    )
    assert response.status_code == 201
    return client


@pytest.fixture
def client_id(client) -> str:
    response = client.post(
        "/api/clients",
        json={"name": "Emma Davis", "email": "emma@example.com", "phone": "555-3456", "address": "789 Elm Drive"},
    )
    return response.json()["id"]


def create_booking(client: TestClient, client_id: str, **overrides):
    payload = {
        "clientId": client_id,
        "service": "Regular Cleaning",
        "date": "2026-03-10T10:00:00Z",
        "time": "10:00",
        "duration": 120,
        "address": "789 Elm Drive",
        "phone": "555-3456",
        "estimatedCost": "120.00",
    }
    payload.update(overrides)
    return client.post("/api/bookings", json=payload)


def test_create_booking_defaults_to_pending(client, client_id):
    response = create_booking(client, client_id)
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["jobId"] is None
    assert data["staff"] == []


def test_booking_requires_existing_client(client):
    response = create_booking(client, "missing-client")
    assert response.status_code == 400
    assert response.json()["error"] == "Client not found"


def test_filter_bookings_by_day_status_and_client(client, client_id):
    tenth = create_booking(client, client_id).json()
    late_tenth = create_booking(client, client_id, date="2026-03-10T23:30:00Z").json()
    eleventh = create_booking(client, client_id, date="2026-03-11T08:00:00Z", status="confirmed").json()

    same_day = client.get("/api/bookings", params={"date": "2026-03-10T00:00:00Z"}).json()
    assert {booking["id"] for booking in same_day} == {tenth["id"], late_tenth["id"]}

    confirmed = client.get("/api/bookings", params={"status": "confirmed"}).json()
    assert [booking["id"] for booking in confirmed] == [eleventh["id"]]

    by_client = client.get("/api/bookings", params={"clientId": client_id}).json()
    assert len(by_client) == 3


def test_update_and_delete_booking(client, client_id):
    booking = create_booking(client, client_id).json()
    response = client.patch(f"/api/bookings/{booking['id']}", json={"status": "confirmed", "staff": ["Ana"]})
    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    assert response.json()["staff"] == ["Ana"]
    assert response.json()["service"] == "Regular Cleaning"

    assert client.delete(f"/api/bookings/{booking['id']}").status_code == 204
    assert client.get(f"/api/bookings/{booking['id']}").status_code == 404


def test_booking_for_unknown_job_is_rejected(client, client_id):
    response = create_booking(client, client_id, jobId="ghost")
    assert response.status_code == 400
    assert response.json()["details"] == [{"field": "jobId", "message": "Job not found", "type": "value_error"}]

    booking = create_booking(client, client_id).json()
    patched = client.patch(f"/api/bookings/{booking['id']}", json={"jobId": "ghost"})
    assert patched.status_code == 400
    assert patched.json()["details"][0]["field"] == "jobId"
