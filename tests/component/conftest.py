"""
Component Test Layer Configuration

Services run against their in-memory repositories; the event bus is
replaced by MockEventBus so published events can be asserted.

Structure:
    tests/component/
    ├── inventory_service/
    ├── product_service/
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"
os.environ["NATS_ENABLED"] = "false"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import MockEventBus
from tests.contracts.inventory.data_contract import InventoryTestDataFactory
from tests.contracts.product.data_contract import ProductTestDataFactory

from microservices.inventory_service.inventory_repository import InventorySKURepository
from microservices.inventory_service.inventory_service import InventorySKUService
from microservices.product_service.product_repository import ProductRepository
from microservices.product_service.product_service import ProductService


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Event Bus Mocks
# =============================================================================

@pytest.fixture
def mock_event_bus() -> MockEventBus:
    """Mock NATS event bus"""
    return MockEventBus()


# =============================================================================
# Inventory
# =============================================================================

@pytest.fixture
def inventory_factory():
    return InventoryTestDataFactory


@pytest.fixture
def inventory_repository() -> InventorySKURepository:
    return InventorySKURepository()


@pytest.fixture
def inventory_service(inventory_repository, mock_event_bus) -> InventorySKUService:
    return InventorySKUService(repository=inventory_repository, event_bus=mock_event_bus)


# =============================================================================
# Product
# =============================================================================

@pytest.fixture
def product_factory():
    return ProductTestDataFactory


@pytest.fixture
def product_repository() -> ProductRepository:
    return ProductRepository()


@pytest.fixture
def product_service(product_repository, mock_event_bus) -> ProductService:
    return ProductService(repository=product_repository, event_bus=mock_event_bus)
