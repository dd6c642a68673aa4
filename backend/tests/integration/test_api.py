"""HTTP API tests using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from frontline.api import create_app, get_game_service


@pytest.fixture
def client(service):
    app = create_app(manage_database=False)
    app.dependency_overrides[get_game_service] = lambda: service
    with TestClient(app) as client:
        yield client


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["alive"] is True


def test_round_flow(client) -> None:
    response = client.post("/rounds")
    assert response.status_code == 201
    round_id = response.json()["id"]

    assert client.post(f"/rounds/{round_id}/open").json()["index"] == 1
    assert client.post("/accounts/alice/deposit", json={"amount": 500}).json()["balance"] == 500

    response = client.post(f"/rounds/{round_id}/stake", json={"player": "alice", "a": 100})
    assert response.status_code == 200
    assert response.json()["a_amount"] == 100

    client.post(f"/rounds/{round_id}/close")

    response = client.post(f"/rounds/{round_id}/players/alice/score")
    # Alone in A: pools tie at the maximum and minimum, max wins -> 0.5x
    assert response.json()["points"] == 1500

    response = client.post(f"/rounds/{round_id}/players/alice/claim", json={"caller": "bob"})
    assert response.status_code == 200
    assert response.json() == {
        "round_index": 1,
        "player": "alice",
        "caller": "bob",
        "fee": 5,
        "reward": 95,
    }

    assert client.get("/accounts/alice").json()["balance"] == 495
    assert client.get("/accounts/bob").json()["balance"] == 5

    kinds = [e["kind"] for e in client.get(f"/rounds/{round_id}/events").json()]
    assert kinds == ["bet_placed", "round_closed", "claimed"]


def test_domain_error_maps_to_conflict(client) -> None:
    round_id = client.post("/rounds").json()["id"]

    response = client.post(f"/rounds/{round_id}/close")
    assert response.status_code == 409
    assert response.json()["code"] == "closed"


def test_missing_round_maps_to_not_found(client) -> None:
    response = client.get("/rounds/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


def test_negative_split_is_rejected(client) -> None:
    round_id = client.post("/rounds").json()["id"]
    client.post(f"/rounds/{round_id}/open")

    response = client.post(f"/rounds/{round_id}/stake", json={"player": "alice", "a": -1})
    assert response.status_code == 422


def test_oversized_stake_maps_to_conflict(client) -> None:
    round_id = client.post("/rounds").json()["id"]
    client.post(f"/rounds/{round_id}/open")
    whale = 4 * 10**17
    client.post("/accounts/alice/deposit", json={"amount": whale})

    response = client.post(f"/rounds/{round_id}/stake", json={"player": "alice", "c": whale})
    assert response.status_code == 409
    assert response.json()["code"] == "stake_too_large"

    client.post(f"/rounds/{round_id}/close")
    assert client.get(f"/rounds/{round_id}").json()["vault"] == 0
    assert client.get("/accounts/alice").json()["balance"] == whale
