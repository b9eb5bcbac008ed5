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


@pytest.mark.parametrize(
    "path, entity",
    [
        ("/api/clients", "Client"),
        ("/api/leads", "Lead"),
        ("/api/jobs", "Job"),
        ("/api/bookings", "Booking"),
        ("/api/messages", "Message"),
        ("/api/services", "Service"),
        ("/api/properties", "Property"),
        ("/api/activities", "Activity"),
        ("/api/follow-ups", "Follow-up"),
    ],
)
def test_unknown_ids_return_404(client, path, entity):
    assert client.delete(f"{path}/missing").json() == {"error": f"{entity} not found"}
    assert client.delete(f"{path}/missing").status_code == 404
    assert client.get(f"{path}/missing").status_code == 404
    assert client.patch(f"{path}/missing", json={}).status_code == 404


def test_deleting_a_client_removes_its_jobs(client):
    client_id = client.post(
        "/api/clients",
        json={"name": "Sarah Johnson", "email": "sarah@example.com", "phone": "555-1234", "address": "123 Oak Street"},
    ).json()["id"]
    job = client.post(
        "/api/jobs",
        json={
            "clientId": client_id,
            "service": "Regular Cleaning",
            "address": "123 Oak Street",
            "scheduledDate": "2026-03-10T09:00:00Z",
            "scheduledTime": "09:00",
            "estimatedDuration": 120,
            "cost": "120.00",
        },
    ).json()

    assert client.delete(f"/api/clients/{client_id}").status_code == 204
    assert client.get(f"/api/jobs/{job['id']}").status_code == 404
