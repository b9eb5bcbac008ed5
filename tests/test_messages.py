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


def create_client(client: TestClient, name: str) -> str:
    response = client.post(
        "/api/clients",
        json={"name": name, "email": f"{name.split()[0].lower()}@example.com", "phone": "555-0000", "address": "1 Main St"},
    )
    return response.json()["id"]


def send(client: TestClient, client_id: str, content: str, sent_at: str, direction: str = "inbound", **extra):
    payload = {
        "clientId": client_id,
        "type": "sms",
        "direction": direction,
        "content": content,
        "sentAt": sent_at,
    }
    payload.update(extra)
    response = client.post("/api/messages", json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_message_defaults(client):
    sarah = create_client(client, "Sarah Johnson")
    response = client.post(
        "/api/messages",
        json={"clientId": sarah, "type": "email", "direction": "inbound", "content": "Hello"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "sent"
    assert data["sentAt"] is not None
    assert data["readAt"] is None
    assert data["sentBy"] is None


def test_outbound_message_is_attributed_to_sender(client):
    sarah = create_client(client, "Sarah Johnson")
    me = client.get("/api/user").json()
    data = send(client, sarah, "See you Tuesday", "2026-03-10T09:00:00Z", direction="outbound")
    assert data["sentBy"] == me["id"]


def test_message_for_unknown_client_is_rejected(client):
    response = client.post(
        "/api/messages",
        json={"clientId": "missing", "type": "sms", "direction": "inbound", "content": "Hi"},
    )
    assert response.status_code == 400


def test_list_messages_by_client_is_chronological(client):
    sarah = create_client(client, "Sarah Johnson")
    mike = create_client(client, "Mike Chen")
    later = send(client, sarah, "Second", "2026-03-10T10:00:00Z")
    earlier = send(client, sarah, "First", "2026-03-10T09:00:00Z")
    send(client, mike, "Other thread", "2026-03-10T11:00:00Z")

    thread = client.get("/api/messages", params={"clientId": sarah}).json()
    assert [message["id"] for message in thread] == [earlier["id"], later["id"]]
    assert len(client.get("/api/messages").json()) == 3


def test_mark_read_sets_read_at(client):
    sarah = create_client(client, "Sarah Johnson")
    message = send(client, sarah, "Can we reschedule?", "2026-03-10T09:00:00Z")
    response = client.patch(f"/api/messages/{message['id']}/read")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "read"
    assert data["readAt"] is not None


def test_read_at_cleared_when_status_moves_away_from_read(client):
    sarah = create_client(client, "Sarah Johnson")
    message = send(client, sarah, "Hi", "2026-03-10T09:00:00Z")
    client.patch(f"/api/messages/{message['id']}/read")
    response = client.patch(f"/api/messages/{message['id']}", json={"status": "delivered"})
    assert response.json()["readAt"] is None


def test_mark_read_on_missing_message_returns_404(client):
    response = client.patch("/api/messages/missing/read")
    assert response.status_code == 404
    assert response.json() == {"error": "Message not found"}


def test_conversations_show_latest_message_and_unread_count(client):
    sarah = create_client(client, "Sarah Johnson")
    mike = create_client(client, "Mike Chen")
    first = send(client, sarah, "First", "2026-03-10T09:00:00Z")
    send(client, sarah, "Reply", "2026-03-10T09:30:00Z", direction="outbound")
    latest = send(client, sarah, "Thanks!", "2026-03-10T10:00:00Z")
    mike_message = send(client, mike, "Quote please", "2026-03-09T08:00:00Z")

    conversations = client.get("/api/conversations").json()
    assert [row["clientId"] for row in conversations] == [sarah, mike]
    by_client = {row["clientId"]: row for row in conversations}
    assert by_client[sarah]["lastMessage"]["id"] == latest["id"]
    assert by_client[sarah]["unreadCount"] == 2
    assert by_client[mike]["lastMessage"]["id"] == mike_message["id"]
    assert by_client[mike]["unreadCount"] == 1

    client.patch(f"/api/messages/{first['id']}/read")
    refreshed = {row["clientId"]: row for row in client.get("/api/conversations").json()}
    assert refreshed[sarah]["unreadCount"] == 1


def test_delete_message(client):
    sarah = create_client(client, "Sarah Johnson")
    message = send(client, sarah, "Hi", "2026-03-10T09:00:00Z")
    assert client.delete(f"/api/messages/{message['id']}").status_code == 204
    assert client.get(f"/api/messages/{message['id']}").status_code == 404


def test_mark_read_keeps_original_read_at(client):
    sarah = create_client(client, "Sarah Johnson")
    message = send(client, sarah, "Hi", "2026-03-10T09:00:00Z")
    first = client.patch(f"/api/messages/{message['id']}/read").json()
    second = client.patch(f"/api/messages/{message['id']}/read").json()
    assert second["readAt"] == first["readAt"]


def test_mark_read_keeps_read_at_supplied_at_creation(client):
    sarah = create_client(client, "Sarah Johnson")
    message = send(client, sarah, "Hi", "2026-03-10T09:00:00Z", status="read", readAt="2026-03-10T09:05:00Z")
    response = client.patch(f"/api/messages/{message['id']}/read")
    assert response.json()["readAt"] == message["readAt"]


def test_message_from_unknown_sender_is_rejected(client):
    sarah = create_client(client, "Sarah Johnson")
    response = client.post(
        "/api/messages",
        json={"clientId": sarah, "type": "sms", "direction": "outbound", "content": "Hi", "sentBy": "ghost"},
    )
    assert response.status_code == 400
    assert response.json()["details"] == [{"field": "sentBy", "message": "User not found", "type": "value_error"}]
