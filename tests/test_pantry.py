"""Tests for pantry and grocery list endpoints."""

from fastapi.testclient import TestClient

from app.services.jwt import get_jwt_service


def other_user_headers(client: TestClient) -> dict:
    response = client.post("/register", json={"name": "Other", "email": "other@example.com", "password": "pw"})
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestPantry:
    def test_requires_auth(self, client: TestClient):
        assert client.get("/pantry").status_code == 401
        assert client.post("/pantry", json={"name": "Rice"}).status_code == 401

    def test_add_and_list(self, client: TestClient, test_user: dict):
        response = client.post(
            "/pantry", json={"name": "Rice", "quantity": "2kg", "expires_at": "2026-12-01"}, headers=test_user["headers"]
        )
        assert response.status_code == 201
        assert response.json()["name"] == "Rice"

        items = client.get("/pantry", headers=test_user["headers"]).json()
        assert [i["name"] for i in items] == ["Rice"]
        assert items[0]["quantity"] == "2kg"

    def test_add_requires_name(self, client: TestClient, test_user: dict):
        response = client.post("/pantry", json={"quantity": "1"}, headers=test_user["headers"])
        assert response.status_code == 400

    def test_update(self, client: TestClient, test_user: dict):
        item = client.post("/pantry", json={"name": "Milk", "quantity": "1L"}, headers=test_user["headers"]).json()
        response = client.put(f"/pantry/{item['id']}", json={"quantity": "2L"}, headers=test_user["headers"])
        assert response.status_code == 200
        assert response.json()["quantity"] == "2L"
        assert response.json()["name"] == "Milk"

    def test_delete(self, client: TestClient, test_user: dict):
        item = client.post("/pantry", json={"name": "Eggs"}, headers=test_user["headers"]).json()
        assert client.delete(f"/pantry/{item['id']}", headers=test_user["headers"]).status_code == 200
        assert client.get("/pantry", headers=test_user["headers"]).json() == []

    def test_items_are_private(self, client: TestClient, test_user: dict):
        item = client.post("/pantry", json={"name": "Saffron"}, headers=test_user["headers"]).json()
        headers = other_user_headers(client)

        assert client.get("/pantry", headers=headers).json() == []
        assert client.put(f"/pantry/{item['id']}", json={"name": "Stolen"}, headers=headers).status_code == 404
        assert client.delete(f"/pantry/{item['id']}", headers=headers).status_code == 404

    def test_missing_item(self, client: TestClient, test_user: dict):
        response = client.delete("/pantry/999", headers=test_user["headers"])
        assert response.status_code == 404
        assert response.json() == {"message": "Pantry item not found"}


class TestGrocery:
    def test_add_and_list(self, client: TestClient, test_user: dict):
        response = client.post("/grocery", json={"name": "Tomatoes", "quantity": "6"}, headers=test_user["headers"])
        assert response.status_code == 201
        assert response.json()["bought"] is False

    def test_bought_items_sort_last(self, client: TestClient, test_user: dict):
        first = client.post("/grocery", json={"name": "Onions"}, headers=test_user["headers"]).json()
        client.post("/grocery", json={"name": "Garlic"}, headers=test_user["headers"])
        client.put(f"/grocery/{first['id']}", json={"bought": True}, headers=test_user["headers"])

        items = client.get("/grocery", headers=test_user["headers"]).json()
        assert [(i["name"], i["bought"]) for i in items] == [("Garlic", False), ("Onions", True)]

    def test_clear_bought(self, client: TestClient, test_user: dict):
        bought = client.post("/grocery", json={"name": "Ginger"}, headers=test_user["headers"]).json()
        client.post("/grocery", json={"name": "Chillies"}, headers=test_user["headers"])
        client.put(f"/grocery/{bought['id']}", json={"bought": True}, headers=test_user["headers"])

        response = client.delete("/grocery/bought", headers=test_user["headers"])
        assert response.status_code == 200
        assert response.json()["removed"] == 1
        assert [i["name"] for i in client.get("/grocery", headers=test_user["headers"]).json()] == ["Chillies"]

    def test_items_are_private(self, client: TestClient, test_user: dict):
        item = client.post("/grocery", json={"name": "Paneer"}, headers=test_user["headers"]).json()
        headers = other_user_headers(client)
        assert client.put(f"/grocery/{item['id']}", json={"bought": True}, headers=headers).status_code == 404

    def test_stale_user_token_sees_nothing(self, client: TestClient, test_user: dict):
        headers = {"Authorization": f"Bearer {get_jwt_service().create_token(9999)}"}
        assert client.get("/grocery", headers=headers).json() == []


class TestNullUpdates:
    """Explicit nulls on required fields are rejected, omitted fields are left alone."""

    def test_pantry_null_name(self, client: TestClient, test_user: dict):
        item = client.post("/pantry", json={"name": "Rice"}, headers=test_user["headers"]).json()
        response = client.put(f"/pantry/{item['id']}", json={"name": None}, headers=test_user["headers"])
        assert response.status_code == 400
        assert client.get("/pantry", headers=test_user["headers"]).json()[0]["name"] == "Rice"

    def test_pantry_null_quantity_clears_it(self, client: TestClient, test_user: dict):
        item = client.post("/pantry", json={"name": "Rice", "quantity": "2kg"}, headers=test_user["headers"]).json()
        response = client.put(f"/pantry/{item['id']}", json={"quantity": None}, headers=test_user["headers"])
        assert response.status_code == 200
        assert response.json()["quantity"] is None

    def test_grocery_null_bought(self, client: TestClient, test_user: dict):
        item = client.post("/grocery", json={"name": "Onions"}, headers=test_user["headers"]).json()
        response = client.put(f"/grocery/{item['id']}", json={"bought": None}, headers=test_user["headers"])
        assert response.status_code == 400
        assert client.get("/grocery", headers=test_user["headers"]).json()[0]["bought"] is False

    def test_grocery_null_name(self, client: TestClient, test_user: dict):
        item = client.post("/grocery", json={"name": "Onions"}, headers=test_user["headers"]).json()
        response = client.put(f"/grocery/{item['id']}", json={"name": None}, headers=test_user["headers"])
        assert response.status_code == 400
