"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    ├── core/                Config, logger and event envelope helpers
    ├── inventory_service/   InventorySKU entity and request models
    └── product_service/     Product entity and request models

Usage:
    pytest tests/unit -v
    pytest tests/unit -m unit -v
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.contracts.inventory.data_contract import InventoryTestDataFactory
from tests.contracts.product.data_contract import ProductTestDataFactory


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


@pytest.fixture
def inventory_factory():
    return InventoryTestDataFactory


@pytest.fixture
def product_factory():
    return ProductTestDataFactory
