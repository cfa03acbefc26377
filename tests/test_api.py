"""HTTP tests for the entry/exit, ticket, spot and health endpoints."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient
from parkit.dao.ticket_dao import TicketDAO
from parkit.database import get_db
from parkit.main import app


@pytest.fixture
def client(db, db_session_factory):
    def override_get_db():
        session = db_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def enter(client, plate="ABC123", vehicle_type=1):
    return client.post("/api/v1/parking/entry", json={"vehicle_type": vehicle_type, "plate_number": plate})


class TestEntryEndpoint:
    def test_car_entry(self, client):
        resp = enter(client)
        assert resp.status_code == 201
        body = resp.json()
        assert body["vehicle_reg_number"] == "ABC123"
        assert body["parking_number"] == 1
        assert body["parking_type"] == "CAR"
        assert body["price"] == 0
        assert body["out_time"] is None
        assert body["id"] is not None

    def test_bike_entry(self, client):
        resp = enter(client, "BIKE01", vehicle_type=2)
        assert resp.status_code == 201
        assert resp.json()["parking_number"] == 4

    def test_invalid_vehicle_type(self, client):
        resp = enter(client, vehicle_type=3)
        assert resp.status_code == 422
        assert resp.json()["error"] == "InvalidSelection"

    def test_blank_plate(self, client):
        resp = enter(client, plate="   ")
        assert resp.status_code == 422
        assert resp.json()["error"] == "InvalidSelection"

    def test_plate_already_parked(self, client):
        assert enter(client, "ABC123").status_code == 201
        resp = enter(client, "ABC123")
        assert resp.status_code == 409
        assert resp.json()["error"] == "VehicleAlreadyParked"
        assert len(client.get("/api/v1/tickets", params={"plate_number": "ABC123"}).json()) == 1

    def test_ticket_save_failure(self, client, monkeypatch):
        monkeypatch.setattr(TicketDAO, "save_ticket", lambda self, ticket: False)

        resp = enter(client)
        assert resp.status_code == 503
        assert resp.json()["error"] == "PersistenceFailure"

        spots = client.get("/api/v1/spots", params={"parking_type": "CAR"}).json()
        assert all(s["available"] for s in spots)

    def test_lot_full(self, client):
        for plate in ("CAR1", "CAR2", "CAR3"):
            assert enter(client, plate).status_code == 201
        resp = enter(client, "CAR4")
        assert resp.status_code == 409
        assert resp.json()["detail"] == "No parking spot available"


class TestExitEndpoint:
    def test_exit_after_entry(self, client):
        enter(client)
        resp = client.post("/api/v1/parking/exit", json={"plate_number": "ABC123"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["out_time"] is not None
        assert body["price"] == 0

        spots = client.get("/api/v1/spots", params={"parking_type": "CAR"}).json()
        assert spots[0]["available"] is True

    def test_exit_unknown_plate(self, client):
        resp = client.post("/api/v1/parking/exit", json={"plate_number": "NOPE"})
        assert resp.status_code == 404
        assert resp.json()["error"] == "TicketNotFound"

    def test_exit_update_failure(self, client, monkeypatch):
        enter(client)
        monkeypatch.setattr(TicketDAO, "update_ticket", lambda self, ticket: False)

        resp = client.post("/api/v1/parking/exit", json={"plate_number": "ABC123"})
        assert resp.status_code == 503
        assert resp.json()["error"] == "PersistenceFailure"

        spots = client.get("/api/v1/spots", params={"parking_type": "CAR"}).json()
        assert spots[0]["available"] is False


class TestReadEndpoints:
    def test_spots(self, client):
        enter(client)
        spots = client.get("/api/v1/spots").json()
        assert len(spots) == 5
        assert spots[0] == {"id": 1, "parking_type": "CAR", "available": False}
        assert all(s["available"] for s in spots[1:])

    def test_tickets_filtered_by_plate(self, client):
        enter(client, "AAA111")
        enter(client, "BBB222")
        tickets = client.get("/api/v1/tickets", params={"plate_number": "AAA111"}).json()
        assert len(tickets) == 1
        assert tickets[0]["vehicle_reg_number"] == "AAA111"
        assert len(client.get("/api/v1/tickets").json()) == 2

    def test_health(self, client):
        enter(client, "BIKE01", vehicle_type=2)
        body = client.get("/api/v1/health").json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"
        assert body["free_spots"] == {"CAR": 3, "BIKE": 1}
