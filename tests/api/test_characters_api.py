from fastapi.testclient import TestClient

from app.config import get_settings
from app.main import create_app
from tests.helpers import RICK, RecordingTransport, page_payload


def test_list_is_idle_and_empty_before_any_load(client, transport):
    response = client.get("/api/v1/characters")
    assert response.status_code == 200
    assert response.json() == {"status": "idle", "count": 0, "characters": [], "error": None}
    assert transport.requests == []


def test_health_reports_fetch_status(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["fetch_status"] == "idle"


def test_refresh_and_wait_returns_scenario_a_payload(client, transport):
    transport.json_body = {"results": [RICK]}
    response = client.post("/api/v1/characters/refresh?wait=true")
    assert response.status_code == 200
    assert response.json() == {
        "status": "succeeded",
        "count": 1,
        "characters": [{"id": 1, "name": "Rick", "status": "Alive", "species": "Human", "image_ref": "u1"}],
        "error": None,
    }
    assert len(transport.requests) == 1


def test_refresh_without_wait_is_accepted(client):
    response = client.post("/api/v1/characters/refresh")
    assert response.status_code == 202
    assert response.json() == {"status": "loading", "accepted": True}
    client.portal.call(client.app.state.store.wait_until_settled)
    assert client.get("/api/v1/characters").json()["count"] == 3


def test_detail_lookup_found_missing_and_invalid(client):
    client.post("/api/v1/characters/refresh?wait=true")

    found = client.get("/api/v1/characters/47")
    assert found.status_code == 200
    assert found.json()["name"] == "Birdperson"

    missing = client.get("/api/v1/characters/999")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Character not found: 999"

    invalid = client.get("/api/v1/characters/abc")
    assert invalid.status_code == 400


def test_detail_before_load_is_not_found(client):
    response = client.get("/api/v1/characters/1")
    assert response.status_code == 404


def test_remote_500_reports_failed_with_error(client, transport):
    transport.status_code = 500
    response = client.post("/api/v1/characters/refresh?wait=true")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "failed"
    assert body["count"] == 0
    assert "HTTP 500" in body["error"]


def test_failed_reload_clears_previous_list(client, transport):
    client.post("/api/v1/characters/refresh?wait=true")
    assert client.get("/api/v1/characters/1").status_code == 200

    transport.json_body = {"bad": "shape"}
    body = client.post("/api/v1/characters/refresh?wait=true").json()
    assert body["status"] == "failed"
    assert body["error"].startswith("decode: ")
    assert client.get("/api/v1/characters/1").status_code == 404


def test_startup_load_fetches_once(monkeypatch):
    monkeypatch.setenv("LOAD_ON_STARTUP", "true")
    get_settings.cache_clear()
    transport = RecordingTransport(json_body=page_payload())
    app = create_app(transport=transport)
    with TestClient(app) as test_client:
        state = test_client.portal.call(app.state.store.wait_until_settled)
        assert state.status.value == "succeeded"
        assert test_client.get("/api/v1/characters").json()["count"] == 3
    assert len(transport.requests) == 1
    assert app.state.store.closed is True
