"""Pruebas de los endpoints de clientes."""

import pytest
from fastapi.testclient import TestClient

CUSTOMERS_URL = "/api/v1/customers"

NEW_CUSTOMER = {
    "taxId": "GODE561231GR8",
    "name": "Ferretería González",
    "email": "Ventas@Ferreteria.MX",
    "phone": "5512345678",
    "address": {"street": "Calle 5 #20", "city": "Puebla", "postalCode": "72000"},
}


@pytest.mark.integration
class TestCustomersEndpoints:
    """CRUD de /api/v1/customers"""

    def test_requires_token(self, client: TestClient):
        assert client.get(CUSTOMERS_URL).status_code == 401

    def test_create_customer(self, client: TestClient, auth_headers: dict):
        response = client.post(CUSTOMERS_URL, json=NEW_CUSTOMER, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["_id"]
        assert data["email"] == "ventas@ferreteria.mx"
        assert data["address"]["postalCode"] == "72000"
        assert data["address"]["country"] == "México"
        assert data["active"] is True

    def test_invalid_email(self, client: TestClient, auth_headers: dict):
        response = client.post(CUSTOMERS_URL, json=dict(NEW_CUSTOMER, email="no-es-correo"), headers=auth_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["field"] == "email"

    def test_duplicate_tax_id(self, client: TestClient, auth_headers: dict, customer):
        response = client.post(
            CUSTOMERS_URL,
            json=dict(NEW_CUSTOMER, taxId=customer.tax_id),
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE"

    def test_duplicate_email(self, client: TestClient, auth_headers: dict, customer):
        response = client.post(
            CUSTOMERS_URL,
            json=dict(NEW_CUSTOMER, email=customer.email.upper()),
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "El correo electrónico ya está registrado"

    def test_list_and_search(self, client: TestClient, auth_headers: dict, customer):
        client.post(CUSTOMERS_URL, json=NEW_CUSTOMER, headers=auth_headers)

        everything = client.get(CUSTOMERS_URL, headers=auth_headers).json()
        found = client.get(CUSTOMERS_URL, params={"search": "ferretería"}, headers=auth_headers).json()

        assert everything["pagination"]["total"] == 2
        assert [item["taxId"] for item in found["customers"]] == ["GODE561231GR8"]

    def test_get_unknown_customer(self, client: TestClient, auth_headers: dict):
        response = client.get(f"{CUSTOMERS_URL}/no-existe", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Cliente no encontrado"

    def test_partial_update_keeps_other_fields(self, client: TestClient, auth_headers: dict, customer):
        response = client.put(
            f"{CUSTOMERS_URL}/{customer.id}",
            json={"phone": "8180000000", "address": {"city": "San Pedro"}},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["phone"] == "8180000000"
        assert data["name"] == customer.name
        assert data["address"]["city"] == "San Pedro"
        assert data["address"]["street"] == customer.address.street

    def test_update_cannot_change_tax_id(self, client: TestClient, auth_headers: dict, customer):
        response = client.put(f"{CUSTOMERS_URL}/{customer.id}", json={"taxId": "OTRO"}, headers=auth_headers)

        assert response.json()["taxId"] == customer.tax_id

    def test_delete_customer(self, client: TestClient, auth_headers: dict, customer):
        response = client.delete(f"{CUSTOMERS_URL}/{customer.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Cliente eliminado correctamente"
        assert client.get(f"{CUSTOMERS_URL}/{customer.id}", headers=auth_headers).status_code == 404

    def test_customer_with_invoices_cannot_be_deleted(
        self, client: TestClient, auth_headers: dict, customer, invoice_payload: dict
    ):
        client.post("/api/v1/invoices", json=invoice_payload, headers=auth_headers)

        response = client.delete(f"{CUSTOMERS_URL}/{customer.id}", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "IN_USE"

    @pytest.mark.parametrize("email", ["ana@@ejemplo.mx", "ana ejemplo@ejemplo.mx", "ana@ejemplo"])
    def test_email_syntax_is_checked(self, client: TestClient, auth_headers: dict, email: str):
        response = client.post(CUSTOMERS_URL, json=dict(NEW_CUSTOMER, email=email), headers=auth_headers)

        assert response.status_code == 400
        assert [error["field"] for error in response.json()["errors"]] == ["email"]

    @pytest.mark.parametrize("search", ["%", "_", "Comercial_del"])
    def test_search_wildcards_are_literal(self, client: TestClient, auth_headers: dict, customer, search: str):
        response = client.get(CUSTOMERS_URL, params={"search": search}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["pagination"]["total"] == 0
