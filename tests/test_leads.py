import pytest
from fastapi.testclient import TestClient

from tidyhq.core.errors import ValidationFailed
from tidyhq.crud.crud_lead import lead_crud
from tidyhq.main import app
from tidyhq.models.client import Client
from tidyhq.services.lead_conversion import convert_lead_to_client


@pytest.fixture(autouse=True)
def setup_db():
    database = app.state.database
    database.drop_all()
    database.create_all()
    for limiter in app.state.rate_limiters.values():
        limiter.reset()
    yield
    database.drop_all()


def sign_in(client: TestClient) -> TestClient:
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
def client() -> TestClient:
    return sign_in(TestClient(app))


def create_lead(client: TestClient, **overrides):
    payload = {
        "name": "Jennifer Williams",
        "email": "jennifer@example.com",
        "phone": "(555) 678-9012",
        "address": "987 Birch Road",
        "service": "Deep Cleaning",
        "source": "Website",
        "value": "275.00",
        "notes": "Monthly deep clean",
    }
    payload.update(overrides)
    return client.post("/api/leads", json=payload)


def test_create_lead_defaults_to_new(client):
    response = create_lead(client)
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "new"
    assert data["clientId"] is None
    assert float(data["value"]) == 275.0


def test_invalid_lead_status_is_rejected(client):
    response = create_lead(client, status="maybe")
    assert response.status_code == 400


def test_filter_leads_by_status(client):
    create_lead(client)
    create_lead(client, name="Robert Taylor", email="robert@example.com", status="contacted")
    response = client.get("/api/leads", params={"status": "contacted"})
    assert response.status_code == 200
    assert [lead["name"] for lead in response.json()] == ["Robert Taylor"]
    assert len(client.get("/api/leads").json()) == 2


def test_update_and_delete_lead(client):
    lead = create_lead(client).json()
    updated = client.patch(f"/api/leads/{lead['id']}", json={"status": "proposal"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "proposal"
    assert updated.json()["name"] == lead["name"]

    assert client.delete(f"/api/leads/{lead['id']}").status_code == 204
    assert client.get(f"/api/leads/{lead['id']}").json() == {"error": "Lead not found"}


def test_convert_lead_creates_client_and_marks_lead_won(client):
    lead = create_lead(client).json()
    response = client.post(f"/api/leads/{lead['id']}/convert")
    assert response.status_code == 200
    body = response.json()
    assert body["lead"]["status"] == "won"
    assert body["lead"]["clientId"] == body["client"]["id"]
    assert body["client"]["address"] == lead["address"]
    assert body["client"]["notes"] == lead["notes"]
    assert body["client"]["status"] == "active"
    assert body["client"]["tags"] == []

    stored_lead = client.get(f"/api/leads/{lead['id']}").json()
    assert stored_lead["status"] == "won"
    assert stored_lead["clientId"] == body["client"]["id"]

    stored_client = client.get(f"/api/clients/{body['client']['id']}").json()
    assert (stored_client["name"], stored_client["email"], stored_client["phone"]) == (
        lead["name"],
        lead["email"],
        lead["phone"],
    )
    assert [item["id"] for item in client.get("/api/clients").json()] == [body["client"]["id"]]


def test_convert_missing_lead_returns_404_and_creates_nothing(client):
    response = client.post("/api/leads/missing/convert")
    assert response.status_code == 404
    assert response.json() == {"error": "Lead not found"}
    assert client.get("/api/clients").json() == []


def test_converting_twice_is_rejected(client):
    lead = create_lead(client).json()
    assert client.post(f"/api/leads/{lead['id']}/convert").status_code == 200
    again = client.post(f"/api/leads/{lead['id']}/convert")
    assert again.status_code == 400
    assert again.json()["error"] == "Lead has already been converted to a client"
    assert len(client.get("/api/clients").json()) == 1


def test_failed_conversion_leaves_no_client_behind(monkeypatch):
    client = sign_in(TestClient(app, raise_server_exceptions=False))
    lead = create_lead(client).json()

    def fail_claim(*args, **kwargs):
        raise RuntimeError("lead update failed")

    monkeypatch.setattr(lead_crud, "claim_for_client", fail_claim)
    response = client.post(f"/api/leads/{lead['id']}/convert")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    monkeypatch.undo()

    assert client.get("/api/clients").json() == []
    unchanged = client.get(f"/api/leads/{lead['id']}").json()
    assert unchanged["status"] == "new"
    assert unchanged["clientId"] is None


def test_client_link_cannot_be_cleared_to_reopen_conversion(client):
    lead = create_lead(client).json()
    converted = client.post(f"/api/leads/{lead['id']}/convert").json()

    response = client.patch(f"/api/leads/{lead['id']}", json={"clientId": None, "notes": "Follow up in spring"})
    assert response.status_code == 200
    assert response.json()["clientId"] == converted["client"]["id"]
    assert response.json()["notes"] == "Follow up in spring"

    again = client.post(f"/api/leads/{lead['id']}/convert")
    assert again.status_code == 400
    assert len(client.get("/api/clients").json()) == 1


def test_client_link_cannot_be_set_on_create_or_update(client):
    created = create_lead(client, clientId="ghost")
    assert created.status_code == 201
    assert created.json()["clientId"] is None

    patched = client.patch(f"/api/leads/{created.json()['id']}", json={"clientId": "ghost"})
    assert patched.status_code == 200
    assert patched.json()["clientId"] is None

    converted = client.post(f"/api/leads/{created.json()['id']}/convert")
    assert converted.status_code == 200


def test_stale_read_cannot_convert_a_lead_twice(client):
    lead_id = create_lead(client).json()["id"]
    database = app.state.database

    with database.session() as stale, database.session() as fresh:
        # Load the lead before the other session converts it
        assert lead_crud.get(stale, lead_id).client_id is None
        convert_lead_to_client(fresh, lead_id)

        with pytest.raises(ValidationFailed):
            convert_lead_to_client(stale, lead_id)

    with database.session() as db:
        assert db.query(Client).count() == 1


def test_claim_for_client_only_succeeds_once(client):
    lead_id = create_lead(client).json()["id"]
    first, second = (
        client.post("/api/clients", json={"name": name, "email": f"{name.lower()}@example.com", "phone": "555-0000", "address": "1 Main St"}).json()["id"]
        for name in ("First", "Second")
    )
    with app.state.database.session() as db:
        assert lead_crud.claim_for_client(db, lead_id=lead_id, client_id=first, status="won")
        assert not lead_crud.claim_for_client(db, lead_id=lead_id, client_id=second, status="won")
        db.rollback()


def test_lead_assigned_to_unknown_user_is_rejected(client):
    response = create_lead(client, assignedTo="ghost")
    assert response.status_code == 400
    assert response.json()["details"] == [{"field": "assignedTo", "message": "User not found", "type": "value_error"}]

    lead = create_lead(client).json()
    patched = client.patch(f"/api/leads/{lead['id']}", json={"assignedTo": "ghost"})
    assert patched.status_code == 400
