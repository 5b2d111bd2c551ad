"""
Root conftest.py - Global configuration for all test layers.

Test Layers:
    - api/        : HTTP contract tests (FastAPI app in-process)
    - component/  : Service layer with the in-memory repository and a mock event bus
    - unit/       : Entities, request models and core helpers (no I/O)

Tests marked requires_nats only run when NATS_TEST_URL points at a server.
"""
import os
import sys

import pytest

# Set testing environment BEFORE any service imports
os.environ.setdefault("ENV", "testing")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ["NATS_ENABLED"] = "false"

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "api: API contract tests")
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "requires_nats: needs a running NATS server")


def pytest_collection_modifyitems(config, items):
    """Skip tests whose infrastructure is unavailable"""
    if os.getenv("NATS_TEST_URL"):
        return

    skip_nats = pytest.mark.skip(reason="NATS_TEST_URL not set")
    for item in items:
        if "requires_nats" in item.keywords:
            item.add_marker(skip_nats)


@pytest.fixture
def nats_test_url() -> str:
    return os.getenv("NATS_TEST_URL", "nats://localhost:4222")
