"""Tests for the FastAPI backend (apps/api/main.py)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from apps.api.main import app, registry


@pytest.fixture()
def client():
    """Fresh test client with an empty registry."""
    registry.clear()
    return TestClient(app)


class TestHealth:
    def test_health(self, client: TestClient):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


class TestProcessRoom:
    def test_rectangle(self, client: TestClient, rectangle_payload: dict):
        r = client.post("/api/process-room", json=rectangle_payload)
        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "success"
        assert body["message"] == "Room processed successfully"
        assert [w["length"] for w in body["data"]["walls"]] == [3.0, 4.0, 3.0, 4.0]
        assert body["data"]["points"][2] == {"x": 3, "y": 4, "z": 0}

    def test_rounding_at_half(self, client: TestClient):
        r = client.post("/api/process-room", json={"points": [{"x": 2.5, "y": -2.5}]})
        assert r.status_code == 200
        assert r.json()["data"]["points"] == [{"x": 3, "y": -3, "z": 0}]

    def test_empty_points(self, client: TestClient):
        r = client.post("/api/process-room", json={"points": []})
        assert r.status_code == 400
        assert r.json() == {
            "status": "error",
            "message": "points must contain at least one vertex",
        }

    def test_missing_points(self, client: TestClient):
        r = client.post("/api/process-room", json={"name": "Hall"})
        assert r.status_code == 400
        assert r.json()["status"] == "error"

    def test_non_object_body(self, client: TestClient):
        r = client.post("/api/process-room", json=[1, 2, 3])
        assert r.status_code == 400
        assert r.json()["status"] == "error"

    def test_bad_coordinate(self, client: TestClient):
        r = client.post("/api/process-room", json={"points": [{"x": "a", "y": 0}]})
        assert r.status_code == 400
        assert r.json()["message"] == "points[0].x must be a number"

    def test_oversized_integer(self, client: TestClient):
        r = client.post(
            "/api/process-room",
            content='{"points": [{"x": 1' + "0" * 400 + ', "y": 0}]}',
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 500
        assert r.json() == {"status": "error", "message": "points[0].x is too large"}

    def test_does_not_store_room(self, client: TestClient, rectangle_payload: dict):
        client.post("/api/process-room", json=rectangle_payload)
        assert client.get("/api/rooms").json() == []


class TestRooms:
    def test_list_empty(self, client: TestClient):
        r = client.get("/api/rooms")
        assert r.status_code == 200
        assert r.json() == []

    def test_create_and_get(self, client: TestClient, rectangle_payload: dict):
        r = client.post("/api/rooms", json=rectangle_payload)
        assert r.status_code == 200
        room = r.json()
        assert room["id"] == 1
        assert room["name"] == "Study"
        assert room["points"][1] == {"x": 3.0, "y": 0.0}
        assert room["created_at"] == room["updated_at"]

        r = client.get("/api/rooms/1")
        assert r.status_code == 200
        assert r.json() == room

    def test_extra_fields_round_trip(self, client: TestClient, irregular_payload: dict):
        room = client.post("/api/rooms", json=irregular_payload).json()
        assert room["floor"] == 2

    def test_list_in_order(self, client: TestClient):
        client.post("/api/rooms", json={"name": "A"})
        client.post("/api/rooms", json={"name": "B"})
        rooms = client.get("/api/rooms").json()
        assert [(r["id"], r["name"]) for r in rooms] == [(1, "A"), (2, "B")]

    def test_get_missing(self, client: TestClient):
        r = client.get("/api/rooms/42")
        assert r.status_code == 404
        assert r.json() == {"error": "Room not found"}
