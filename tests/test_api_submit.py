import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from fastapi.testclient import TestClient

from feature_intake.main import app
from feature_intake.core.config import Settings, get_settings
from feature_intake.store import RequestStore, get_store


VALID_PAYLOAD = {
    "title": "Export to CSV",
    "description": "Allow exporting the request list",
    "acceptance_criteria": "A CSV file is downloaded",
    "priority": "high",
}


def create_test_client():
    app.dependency_overrides.clear()
    store = RequestStore()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: Settings(github_mcp_server_url=None)
    return TestClient(app), store


def test_submit_assigns_sequential_ids():
    client, store = create_test_client()

    r1 = client.post("/api/submit", json=VALID_PAYLOAD)
    assert r1.status_code == 200
    body = r1.json()
    assert body["success"] is True
    assert body["message"] == "Feature request submitted successfully"
    assert body["data"]["id"] == 1
    assert body["data"]["status"] == "submitted"
    assert body["data"]["created_at"]

    r2 = client.post("/api/submit", json={**VALID_PAYLOAD, "title": "Second"})
    assert r2.json()["data"]["id"] == 2
    assert len(store) == 2

    app.dependency_overrides.clear()


def test_submit_normalizes_components():
    client, _ = create_test_client()

    resp = client.post("/api/submit", json={**VALID_PAYLOAD, "affected_components": "a, b ,, c"})
    assert resp.json()["data"]["affected_components"] == ["a", "b", "c"]

    resp = client.post("/api/submit", json={**VALID_PAYLOAD, "affected_components": ""})
    assert resp.json()["data"]["affected_components"] == []

    resp = client.post("/api/submit", json=VALID_PAYLOAD)
    data = resp.json()["data"]
    assert data["affected_components"] == []
    assert data["target_timeline"] == ""
    assert data["example_usage"] == ""
    assert data["technical_constraints"] == ""

    app.dependency_overrides.clear()


def test_submit_missing_required_field_leaves_store_untouched():
    client, store = create_test_client()

    for field in ("title", "description", "acceptance_criteria", "priority"):
        missing = {k: v for k, v in VALID_PAYLOAD.items() if k != field}
        resp = client.post("/api/submit", json=missing)
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "message": "Please fill in all required fields"}

        empty = {**VALID_PAYLOAD, field: ""}
        assert client.post("/api/submit", json=empty).status_code == 400

        blank = {**VALID_PAYLOAD, field: "   "}
        assert client.post("/api/submit", json=blank).status_code == 400

    listing = client.get("/api/requests").json()
    assert listing["data"] == []
    assert len(store) == 0

    # el id no se consume con los rechazos
    assert client.post("/api/submit", json=VALID_PAYLOAD).json()["data"]["id"] == 1

    app.dependency_overrides.clear()


def test_submit_non_string_values_treated_as_missing():
    client, store = create_test_client()

    resp = client.post("/api/submit", json={**VALID_PAYLOAD, "title": 42})
    assert resp.status_code == 400
    assert len(store) == 0

    app.dependency_overrides.clear()


def test_submit_accepts_priority_outside_enum():
    client, _ = create_test_client()

    resp = client.post("/api/submit", json={**VALID_PAYLOAD, "priority": "urgent"})
    assert resp.status_code == 200
    assert resp.json()["data"]["priority"] == "urgent"

    app.dependency_overrides.clear()


def test_submit_invalid_json():
    client, store = create_test_client()

    resp = client.post(
        "/api/submit",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid JSON"}

    resp = client.post("/api/submit", json=["title"])
    assert resp.status_code == 400

    resp = client.post(
        "/api/submit",
        content="[" * 100000,
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid JSON"}
    assert len(store) == 0

    app.dependency_overrides.clear()


def test_list_requests_empty_store():
    client, _ = create_test_client()

    resp = client.get("/api/requests")
    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "message": "Feature requests retrieved successfully",
        "data": [],
    }

    app.dependency_overrides.clear()


def test_list_requests_in_submission_order():
    client, _ = create_test_client()

    titles = ["First", "Second", "Third"]
    for title in titles:
        client.post("/api/submit", json={**VALID_PAYLOAD, "title": title})

    data = client.get("/api/requests").json()["data"]
    assert [item["title"] for item in data] == titles
    assert [item["id"] for item in data] == [1, 2, 3]

    app.dependency_overrides.clear()


def test_wrong_method_returns_405_envelope():
    client, _ = create_test_client()

    resp = client.get("/api/submit")
    assert resp.status_code == 405
    assert resp.json() == {"success": False, "message": "Method not allowed"}

    resp = client.post("/api/requests", json={})
    assert resp.status_code == 405
    assert resp.json()["success"] is False

    app.dependency_overrides.clear()
