"""
Inventory Service Routes Registry

Defines service metadata and routes exposed by the service info endpoint.
"""

from typing import Any, Dict

SERVICE_METADATA = {
    "service_name": "inventory_service",
    "version": "1.0.0",
    "tags": ["inventory", "sku", "v1"],
    "capabilities": [
        "sku_management",
        "stock_receiving",
        "stock_removal",
        "stock_reservation",
        "low_stock_reporting",
    ],
}

BASE_PATH = "/api/v1/inventory"

ROUTES = [
    {"path": "/health", "methods": ["GET"], "description": "Health check"},
    {"path": f"{BASE_PATH}/health", "methods": ["GET"], "description": "Service health check (API v1)"},
    {"path": f"{BASE_PATH}/info", "methods": ["GET"], "description": "Service info"},
    {"path": f"{BASE_PATH}/skus", "methods": ["GET", "POST"], "description": "List / create SKUs"},
    {"path": f"{BASE_PATH}/skus/{{sku_id}}", "methods": ["GET", "DELETE"], "description": "Get / delete SKU"},
    {"path": f"{BASE_PATH}/skus/code/{{sku_code}}", "methods": ["GET"], "description": "Get SKU by code"},
    {"path": f"{BASE_PATH}/skus/{{sku_id}}/receive", "methods": ["POST"], "description": "Receive stock"},
    {"path": f"{BASE_PATH}/skus/{{sku_id}}/remove", "methods": ["POST"], "description": "Remove stock"},
    {"path": f"{BASE_PATH}/skus/{{sku_id}}/reserve", "methods": ["POST"], "description": "Reserve stock"},
    {"path": f"{BASE_PATH}/skus/{{sku_id}}/release", "methods": ["POST"], "description": "Release reservation"},
]


def get_route_summary() -> Dict[str, Any]:
    """Compact route metadata for the info endpoint"""
    return {
        "route_count": len(ROUTES),
        "routes": [r["path"] for r in ROUTES],
        "api_version": "v1",
        "base_path": BASE_PATH,
    }


__all__ = ["SERVICE_METADATA", "BASE_PATH", "ROUTES", "get_route_summary"]
