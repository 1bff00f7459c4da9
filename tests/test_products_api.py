"""Pruebas de los endpoints de productos."""

import json

import pytest
from fastapi.testclient import TestClient

PRODUCTS_URL = "/api/v1/products"

NEW_PRODUCT = {
    "code": "HW-010",
    "name": "Router inalámbrico",
    "price": 899.5,
    "taxRate": 16,
    "unit": "pieza",
    "stock": 12,
    "category": "hardware",
}


@pytest.mark.integration
class TestProductsEndpoints:
    """CRUD de /api/v1/products"""

    def test_create_product(self, client: TestClient, auth_headers: dict):
        response = client.post(PRODUCTS_URL, json=NEW_PRODUCT, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["code"] == "HW-010"
        assert data["taxRate"] == 16
        assert data["active"] is True

    def test_negative_price_is_rejected(self, client: TestClient, auth_headers: dict):
        response = client.post(PRODUCTS_URL, json=dict(NEW_PRODUCT, price=-1), headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "price"

    def test_duplicate_code(self, client: TestClient, auth_headers: dict, product):
        response = client.post(PRODUCTS_URL, json=dict(NEW_PRODUCT, code=product.code), headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {
            "message": f"Ya existe un producto con el código {product.code}",
            "code": "DUPLICATE",
        }

    def test_list_filters_by_category(self, client: TestClient, auth_headers: dict, product):
        client.post(PRODUCTS_URL, json=NEW_PRODUCT, headers=auth_headers)

        response = client.get(PRODUCTS_URL, params={"category": "hardware"}, headers=auth_headers)

        assert [item["code"] for item in response.json()["products"]] == ["HW-010"]

    def test_update_product(self, client: TestClient, auth_headers: dict, product):
        response = client.put(
            f"{PRODUCTS_URL}/{product.id}",
            json={"price": 120, "active": False},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 120
        assert data["active"] is False
        assert data["name"] == product.name

    def test_update_to_existing_code(self, client: TestClient, auth_headers: dict, product, second_product):
        response = client.put(
            f"{PRODUCTS_URL}/{product.id}",
            json={"code": second_product.code},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE"

    def test_delete_product(self, client: TestClient, auth_headers: dict, product):
        response = client.delete(f"{PRODUCTS_URL}/{product.id}", headers=auth_headers)

        assert response.status_code == 200
        assert client.get(f"{PRODUCTS_URL}/{product.id}", headers=auth_headers).status_code == 404

    def test_product_on_invoice_cannot_be_deleted(
        self, client: TestClient, auth_headers: dict, product, invoice_payload: dict
    ):
        client.post("/api/v1/invoices", json=invoice_payload, headers=auth_headers)

        response = client.delete(f"{PRODUCTS_URL}/{product.id}", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "IN_USE"

    @pytest.mark.parametrize("field", ["price", "taxRate", "stock"])
    def test_non_finite_numbers_are_rejected(self, client: TestClient, auth_headers: dict, field: str):
        response = client.post(
            PRODUCTS_URL,
            content=json.dumps(dict(NEW_PRODUCT, **{field: float("inf")})),
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert [error["field"] for error in response.json()["errors"]] == [field]

    def test_search_underscore_is_literal(self, client: TestClient, auth_headers: dict, product, second_product):
        response = client.get(PRODUCTS_URL, params={"search": "SRV_001"}, headers=auth_headers)

        assert response.json()["products"] == []
