from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from tidyhq.core.time import utc_now
from tidyhq.main import app
from tidyhq.services import dashboard_service


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


def add_client(client: TestClient, name: str, status: str = "active") -> str:
    response = client.post(
        "/api/clients",
        json={"name": name, "email": "c@example.com", "phone": "555", "address": "1 Main St", "status": status},
    )
    return response.json()["id"]


def add_job(client: TestClient, client_id: str, cost: str, status: str = "scheduled", **extra):
    payload = {
        "clientId": client_id,
        "service": "Regular Cleaning",
        "address": "1 Main St",
        "scheduledDate": utc_now().isoformat(),
        "scheduledTime": "09:00",
        "estimatedDuration": 60,
        "cost": cost,
        "status": status,
    }
    payload.update(extra)
    response = client.post("/api/jobs", json=payload)
    assert response.status_code == 201
    return response.json()


def test_empty_dashboard(client):
    response = client.get("/api/dashboard/stats")
    assert response.status_code == 200
    assert response.json() == {
        "totalClients": 0,
        "totalJobs": 0,
        "totalRevenue": 0,
        "activeLeads": 0,
        "completedJobsThisMonth": 0,
        "pendingBookings": 0,
    }


def test_dashboard_counts(client):
    active = add_client(client, "Active Client")
    add_client(client, "Prospect", status="prospect")
    add_job(client, active, "120.00", status="completed")
    add_job(client, active, "80.50", status="completed")
    add_job(client, active, "300.00")

    for status in ("new", "contacted", "proposal", "won", "lost"):
        client.post(
            "/api/leads",
            json={"name": status, "email": "l@example.com", "phone": "555", "service": "Deep", "source": "Web",
                  "value": "100", "status": status},
        )
    client.post(
        "/api/bookings",
        json={"clientId": active, "service": "Regular", "date": utc_now().isoformat(), "time": "10:00",
              "duration": 60, "address": "1 Main St", "phone": "555", "estimatedCost": "90"},
    )

    stats = client.get("/api/dashboard/stats").json()
    assert stats["totalClients"] == 1
    assert stats["totalJobs"] == 3
    assert stats["totalRevenue"] == pytest.approx(200.5)
    assert stats["activeLeads"] == 3
    assert stats["completedJobsThisMonth"] == 2
    assert stats["pendingBookings"] == 1


def test_completed_jobs_this_month_ignores_older_completions(client):
    client_id = add_client(client, "Active Client")
    job = add_job(client, client_id, "100.00", status="completed")
    old = (utc_now().replace(day=1) - timedelta(days=3)).isoformat()
    client.patch(f"/api/jobs/{job['id']}", json={"completedAt": old})

    stats = client.get("/api/dashboard/stats").json()
    assert stats["completedJobsThisMonth"] == 0
    assert stats["totalRevenue"] == pytest.approx(100.0)


def test_dashboard_failure_is_reported_not_zeroed(client, monkeypatch):
    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is down"))

    monkeypatch.setattr(dashboard_service, "start_of_month", broken_query)
    response = client.get("/api/dashboard/stats")
    assert response.status_code == 503
    assert response.json() == {"error": "Dashboard statistics unavailable"}


def test_debug_info_reports_table_counts(client):
    add_client(client, "Active Client")
    response = client.get("/api/debug/db-info")
    assert response.status_code == 200
    data = response.json()
    assert data["databaseUrl"] == "SET"
    assert data["tableCounts"]["clients"] == 1
    assert data["tableCounts"]["leads"] == 0
