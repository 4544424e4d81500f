"""Tests for the nutrition log endpoints."""

from fastapi.testclient import TestClient


class TestNutrition:
    def test_requires_auth(self, client: TestClient):
        assert client.get("/nutrition/data").status_code == 401

    def test_empty_log(self, client: TestClient, test_user: dict):
        response = client.get("/nutrition/data", headers=test_user["headers"])
        assert response.status_code == 200
        assert response.json() == []

    def test_intake_accumulates_per_day(self, client: TestClient, test_user: dict):
        headers = test_user["headers"]
        client.post("/nutrition/data", json={"date": "2026-10-18", "calories": 500, "protein": 20}, headers=headers)
        response = client.post(
            "/nutrition/data", json={"date": "2026-10-18", "calories": 250, "fat": 10}, headers=headers
        )
        assert response.status_code == 200
        assert response.json() == {"date": "2026-10-18", "calories": 750, "protein": 20, "fat": 10, "carbs": 0}

    def test_days_sorted(self, client: TestClient, test_user: dict):
        headers = test_user["headers"]
        client.post("/nutrition/data", json={"date": "2026-10-19", "calories": 100}, headers=headers)
        client.post("/nutrition/data", json={"date": "2026-10-17", "calories": 200}, headers=headers)

        data = client.get("/nutrition/data", headers=headers).json()
        assert [d["date"] for d in data] == ["2026-10-17", "2026-10-19"]

    def test_rejects_bad_input(self, client: TestClient, test_user: dict):
        headers = test_user["headers"]
        assert client.post("/nutrition/data", json={"date": "yesterday"}, headers=headers).status_code == 400
        bad = {"date": "2026-10-18", "calories": -5}
        assert client.post("/nutrition/data", json=bad, headers=headers).status_code == 400

    def test_rejects_impossible_date(self, client: TestClient, test_user: dict):
        response = client.post("/nutrition/data", json={"date": "2026-13-45", "calories": 100}, headers=test_user["headers"])
        assert response.status_code == 400
        assert client.get("/nutrition/data", headers=test_user["headers"]).json() == []
