"""
API Test Layer Configuration

HTTP contract tests for the FastAPI apps.
- Default mode drives each app in-process through TestClient, lifespan included
- API_TEST_MODE=direct targets already running services over httpx

Usage:
    pytest tests/api -v                    # Run all API tests
    pytest tests/api -v -k "inventory"     # Run inventory API tests
    API_TEST_MODE=direct pytest tests/api  # Against running services
"""

import os
import sys
from typing import Generator, Union

import httpx
import pytest
from fastapi.testclient import TestClient

# Set testing environment BEFORE any imports
os.environ.setdefault("ENV", "testing")
os.environ["NATS_ENABLED"] = "false"

# Add project root
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)


# =============================================================================
# Configuration
# =============================================================================


class APITestConfig:
    """API test configuration"""

    SERVICE_PORTS = {
        "product": 8215,
        "inventory": 8252,
    }

    # Test mode: "inprocess" or "direct"
    TEST_MODE = os.getenv("API_TEST_MODE", "inprocess")

    # Timeouts
    HTTP_TIMEOUT = 30.0

    @classmethod
    def get_base_url(cls, service: str) -> str:
        """Get base URL for a running service"""
        port = cls.SERVICE_PORTS.get(service)
        if not port:
            raise ValueError(f"Unknown service: {service}")
        return f"http://localhost:{port}"


ClientType = Union[TestClient, httpx.Client]


def _client_for(service: str, app) -> Generator[ClientType, None, None]:
    if APITestConfig.TEST_MODE == "direct":
        with httpx.Client(
            base_url=APITestConfig.get_base_url(service),
            timeout=APITestConfig.HTTP_TIMEOUT,
        ) as client:
            yield client
    else:
        # Entering the context runs the lifespan, so each test gets a fresh store
        with TestClient(app) as client:
            yield client


# =============================================================================
# Service Clients
# =============================================================================


@pytest.fixture
def inventory_client() -> Generator[ClientType, None, None]:
    """Inventory service client"""
    from microservices.inventory_service.main import app

    yield from _client_for("inventory", app)


@pytest.fixture
def product_client() -> Generator[ClientType, None, None]:
    """Product service client"""
    from microservices.product_service.main import app

    yield from _client_for("product", app)


# =============================================================================
# Assertion Helpers
# =============================================================================


class APIAssertions:
    """API-specific assertion helpers"""

    @staticmethod
    def assert_success(response: httpx.Response, expected_status: int = 200):
        """Assert response is successful"""
        assert response.status_code == expected_status, (
            f"Expected {expected_status}, got {response.status_code}: {response.text}"
        )

    @staticmethod
    def assert_created(response: httpx.Response):
        """Assert resource was created"""
        assert response.status_code == 201, (
            f"Expected 201, got {response.status_code}: {response.text}"
        )

    @staticmethod
    def assert_not_found(response: httpx.Response):
        """Assert resource not found"""
        assert response.status_code == 404, f"Expected 404, got {response.status_code}"

    @staticmethod
    def assert_bad_request(response: httpx.Response):
        """Assert validation error"""
        assert response.status_code == 400, (
            f"Expected 400, got {response.status_code}: {response.text}"
        )

    @staticmethod
    def assert_has_fields(data: dict, fields: list):
        """Assert response has required fields"""
        missing = [f for f in fields if f not in data]
        assert not missing, f"Missing fields: {missing}"


@pytest.fixture
def api_assert() -> APIAssertions:
    """Provide API assertion helpers"""
    return APIAssertions()
