"""
API tests for the customers, products and orders endpoints

Repositories are replaced with the in-memory ones from conftest through
FastAPI dependency overrides, so no database is needed.
"""
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.api.dependencies import (
    get_customers_repository,
    get_orders_repository,
    get_products_repository,
)


@pytest.fixture
def client(customers_repository, products_repository, orders_repository):
    app.dependency_overrides[get_customers_repository] = lambda: customers_repository
    app.dependency_overrides[get_products_repository] = lambda: products_repository
    app.dependency_overrides[get_orders_repository] = lambda: orders_repository
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestOrdersApi:

    def test_create_order(self, client, customer, catalog):
        response = client.post("/api/v1/orders/", json={
            "customer_id": "c1",
            "products": [{"id": "p1", "quantity": 3}]
        })

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["data"]["customer"]["id"] == "c1"
        assert body["data"]["order_products"][0]["product_id"] == "p1"
        assert body["data"]["order_products"][0]["quantity"] == 3
        assert body["data"]["order_products"][0]["price"] == 10.0
        assert body["data"]["total"] == 30.0
        assert catalog.products["p1"].quantity == 2

    def test_create_order_insufficient_stock(self, client, customer, catalog, orders_repository):
        response = client.post("/api/v1/orders/", json={
            "customer_id": "c1",
            "products": [{"id": "p1", "quantity": 7}]
        })

        assert response.status_code == 400
        assert response.json()["detail"] == "Products quantity in stock under requested amount: p1"
        assert catalog.products["p1"].quantity == 5
        assert orders_repository.orders == {}

    def test_create_order_invalid_customer(self, client, catalog):
        response = client.post("/api/v1/orders/", json={
            "customer_id": "nobody",
            "products": [{"id": "p1", "quantity": 1}]
        })

        assert response.status_code == 400
        assert response.json()["detail"] == "Customer id not valid"

    def test_create_order_missing_products(self, client, customer, catalog):
        response = client.post("/api/v1/orders/", json={
            "customer_id": "c1",
            "products": [{"id": "p1", "quantity": 1}, {"id": "zz", "quantity": 1}]
        })

        assert response.status_code == 400
        assert response.json()["detail"] == "Could not find products with ids zz"

    @pytest.mark.parametrize("products", [
        [],
        [{"id": "p1", "quantity": 0}],
        [{"id": "p1", "quantity": -2}],
    ])
    def test_create_order_rejects_invalid_payload(self, client, customer, catalog, products):
        response = client.post("/api/v1/orders/", json={"customer_id": "c1", "products": products})

        assert response.status_code == 422
        assert catalog.update_calls == []

    def test_get_order(self, client, customer, catalog):
        created = client.post("/api/v1/orders/", json={
            "customer_id": "c1",
            "products": [{"id": "p2", "quantity": 2}]
        }).json()["data"]

        response = client.get(f"/api/v1/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == created["id"]

    def test_get_unknown_order(self, client):
        response = client.get("/api/v1/orders/does-not-exist")

        assert response.status_code == 404
        assert response.json()["detail"] == "Order not found"


class TestCustomersAndProductsApi:

    def test_create_customer(self, client, customers_repository):
        response = client.post("/api/v1/customers/", json={"name": "Luis", "email": "luis@example.com"})

        assert response.status_code == 200
        assert customers_repository.find_by_email("luis@example.com") is not None

    def test_create_customer_duplicate_email(self, client, customer):
        response = client.post("/api/v1/customers/", json={"name": "Ana", "email": "ana@example.com"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already used"

    def test_create_product(self, client, products_repository):
        response = client.post("/api/v1/products/", json={"name": "Mix Frutos", "price": 4.5, "quantity": 20})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["price"] == 4.5
        assert data["quantity"] == 20

    def test_create_product_duplicate_name(self, client, catalog):
        response = client.post("/api/v1/products/", json={"name": "Barra Cacao", "price": 1, "quantity": 1})

        assert response.status_code == 400
        assert response.json()["detail"] == "Product already exists"
