"""
Product Service - API Tests

HTTP contract tests for the product catalog and stock endpoints.
Validates status codes, the {"detail": ...} error body and response schemas.

Usage:
    pytest tests/api/product_service/ -v
    pytest tests/api/product_service/ -v -k "stock"
"""
import pytest
from fastapi.testclient import TestClient

from tests.contracts.product.data_contract import (
    AvailabilityResponseContract,
    ErrorResponseContract,
    ProductResponseContract,
    ProductTestDataFactory,
)

pytestmark = pytest.mark.api

PRODUCTS = "/api/v1/products"


def _create(client, **overrides) -> dict:
    response = client.post(PRODUCTS, json=ProductTestDataFactory.make_create_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


# ============================================================================
# Health & info
# ============================================================================

class TestProductHealthAPI:
    """Health and info endpoints"""

    def test_health(self, product_client):
        response = product_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["dependencies"]["event_bus"] == "disabled"

    def test_info(self, product_client):
        body = product_client.get("/api/v1/product/info").json()

        assert body["service"] == "product_service"
        assert set(body["routes"]) == {"health", "catalog", "stock"}


# ============================================================================
# Catalog
# ============================================================================

class TestCreateProductAPI:
    """POST /products"""

    def test_create_returns_201(self, product_client, api_assert):
        payload = ProductTestDataFactory.make_create_payload(price=19.99, stock=3)

        response = product_client.post(PRODUCTS, json=payload)

        api_assert.assert_created(response)
        product = ProductResponseContract(**response.json())
        assert product.sku == payload["sku"]
        assert product.price == 19.99
        assert product.is_active is True

    def test_duplicate_sku_returns_400(self, product_client, api_assert):
        payload = ProductTestDataFactory.make_create_payload()
        product_client.post(PRODUCTS, json=payload)

        response = product_client.post(PRODUCTS, json=payload)

        api_assert.assert_bad_request(response)
        assert response.json() == {"detail": f"Product with SKU {payload['sku']} already exists"}

    def test_invalid_payloads_return_400(self, product_client, api_assert):
        for payload in ProductTestDataFactory.make_invalid_create_payloads():
            response = product_client.post(PRODUCTS, json=payload)

            api_assert.assert_bad_request(response)
            error = ErrorResponseContract(**response.json())
            assert isinstance(error.detail, list)

    @pytest.mark.parametrize("field, value", [("price", "19.99"), ("stock", True)])
    def test_non_numeric_json_returns_400(self, product_client, api_assert, field, value):
        payload = ProductTestDataFactory.make_create_payload(**{field: value})

        response = product_client.post(PRODUCTS, json=payload)

        api_assert.assert_bad_request(response)
        assert response.json()["detail"][0]["loc"] == ["body", field]

    def test_patch_string_price_returns_400(self, product_client, api_assert):
        created = _create(product_client)

        response = product_client.patch(f"{PRODUCTS}/{created['id']}", json={"price": "5.00"})

        api_assert.assert_bad_request(response)

    def test_validation_detail_points_at_field(self, product_client):
        payload = ProductTestDataFactory.make_create_payload(stock=-1)

        detail = product_client.post(PRODUCTS, json=payload).json()["detail"]

        assert detail[0]["loc"] == ["body", "stock"]


class TestReadProductAPI:
    """GET /products"""

    def test_get_by_id(self, product_client):
        created = _create(product_client)

        response = product_client.get(f"{PRODUCTS}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_returns_404(self, product_client, api_assert):
        response = product_client.get(f"{PRODUCTS}/prod_000000000000")

        api_assert.assert_not_found(response)
        assert response.json() == {"detail": "Product with ID prod_000000000000 not found"}

    def test_get_by_sku(self, product_client):
        created = _create(product_client)

        response = product_client.get(f"{PRODUCTS}/sku/{created['sku']}")

        assert response.json()["id"] == created["id"]

    def test_list_by_category(self, product_client):
        category = f"cat-{ProductTestDataFactory.make_sku().lower()}"
        first = _create(product_client, category=category)
        second = _create(product_client, category=category)

        response = product_client.get(PRODUCTS, params={"category": category})

        assert [p["id"] for p in response.json()] == [first["id"], second["id"]]

    def test_list_all(self, product_client):
        created = _create(product_client)

        ids = [p["id"] for p in product_client.get(PRODUCTS).json()]

        assert created["id"] in ids


class TestUpdateDeleteProductAPI:
    """PATCH / DELETE"""

    def test_patch_applies_only_sent_fields(self, product_client):
        created = _create(product_client, price=10.0)

        response = product_client.patch(f"{PRODUCTS}/{created['id']}", json={"name": "Renamed"})

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Renamed"
        assert body["price"] == 10.0
        assert body["created_at"] == created["created_at"]

    def test_patch_unknown_field_returns_400(self, product_client, api_assert):
        created = _create(product_client)

        response = product_client.patch(f"{PRODUCTS}/{created['id']}", json={"colour": "red"})

        api_assert.assert_bad_request(response)

    def test_patch_to_existing_sku_returns_400(self, product_client, api_assert):
        taken = _create(product_client)
        mine = _create(product_client)

        response = product_client.patch(f"{PRODUCTS}/{mine['id']}", json={"sku": taken["sku"]})

        api_assert.assert_bad_request(response)

    def test_patch_missing_returns_404(self, product_client, api_assert):
        response = product_client.patch(f"{PRODUCTS}/prod_missing", json={"name": "x"})

        api_assert.assert_not_found(response)

    def test_delete_returns_204(self, product_client):
        created = _create(product_client)

        response = product_client.delete(f"{PRODUCTS}/{created['id']}")

        assert response.status_code == 204
        assert product_client.get(f"{PRODUCTS}/{created['id']}").status_code == 404

    def test_delete_missing_returns_404(self, product_client, api_assert):
        api_assert.assert_not_found(product_client.delete(f"{PRODUCTS}/prod_missing"))


# ============================================================================
# Stock
# ============================================================================

class TestStockAPI:
    """Stock and availability endpoints"""

    def test_increase_and_decrease(self, product_client):
        created = _create(product_client, stock=5)
        url = f"{PRODUCTS}/{created['id']}/stock"

        increased = product_client.post(f"{url}/increase", json={"quantity": 5}).json()
        decreased = product_client.post(f"{url}/decrease", json={"quantity": 10}).json()

        assert increased["stock"] == 10
        assert decreased["stock"] == 0

    def test_decrease_too_much_returns_400(self, product_client, api_assert):
        created = _create(product_client, stock=1)

        response = product_client.post(
            f"{PRODUCTS}/{created['id']}/stock/decrease", json={"quantity": 2}
        )

        api_assert.assert_bad_request(response)
        assert "Insufficient stock" in response.json()["detail"]

    def test_zero_quantity_returns_400(self, product_client, api_assert):
        created = _create(product_client)

        response = product_client.post(
            f"{PRODUCTS}/{created['id']}/stock/increase", json={"quantity": 0}
        )

        api_assert.assert_bad_request(response)

    def test_availability(self, product_client):
        created = _create(product_client, stock=4)
        url = f"{PRODUCTS}/{created['id']}/availability"

        enough = AvailabilityResponseContract(**product_client.get(url, params={"quantity": 4}).json())
        too_many = product_client.get(url, params={"quantity": 5}).json()

        assert enough.available is True
        assert too_many["available"] is False

    def test_availability_defaults_to_one(self, product_client):
        created = _create(product_client, stock=1)

        body = product_client.get(f"{PRODUCTS}/{created['id']}/availability").json()

        assert body["quantity"] == 1
        assert body["available"] is True

    def test_availability_rejects_zero(self, product_client, api_assert):
        created = _create(product_client)

        response = product_client.get(
            f"{PRODUCTS}/{created['id']}/availability", params={"quantity": 0}
        )

        api_assert.assert_bad_request(response)


class TestUnexpectedErrorAPI:

    def test_unexpected_error_returns_500(self, product_client):
        if not isinstance(product_client, TestClient):
            pytest.skip("needs dependency overrides on the in-process app")

        from microservices.product_service.main import app, get_product_service

        class BrokenService:
            async def find_all(self):
                raise RuntimeError("boom")

        app.dependency_overrides[get_product_service] = lambda: BrokenService()
        try:
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get(PRODUCTS)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
