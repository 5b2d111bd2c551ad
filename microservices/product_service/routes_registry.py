"""
Product Service Routes Registry

Defines all API routes so route metadata is centralized and easy to maintain.
"""

from typing import Any, Dict, List


BASE_PATH = "/api/v1/products"

# Route definitions for product_service
PRODUCT_SERVICE_ROUTES = [
    # Health & Info
    {"path": "/health", "methods": ["GET"], "description": "Health check"},
    {"path": "/api/v1/product/info", "methods": ["GET"], "description": "Service info"},

    # Catalog
    {"path": BASE_PATH, "methods": ["GET", "POST"], "description": "List / create products"},
    {"path": f"{BASE_PATH}/{{product_id}}", "methods": ["GET", "PATCH", "DELETE"], "description": "Get / update / delete product"},
    {"path": f"{BASE_PATH}/sku/{{sku}}", "methods": ["GET"], "description": "Get product by SKU"},

    # Stock
    {"path": f"{BASE_PATH}/{{product_id}}/stock/increase", "methods": ["POST"], "description": "Increase stock"},
    {"path": f"{BASE_PATH}/{{product_id}}/stock/decrease", "methods": ["POST"], "description": "Decrease stock"},
    {"path": f"{BASE_PATH}/{{product_id}}/availability", "methods": ["GET"], "description": "Check availability"},
]


def get_categorized_routes() -> Dict[str, List[Dict[str, Any]]]:
    """Routes grouped by area, for the info endpoint"""
    categories: Dict[str, List[Dict[str, Any]]] = {
        "health": [],
        "catalog": [],
        "stock": [],
    }

    for route in PRODUCT_SERVICE_ROUTES:
        path = route["path"]
        if not path.startswith(BASE_PATH):
            categories["health"].append(route)
        elif "/stock/" in path or path.endswith("/availability"):
            categories["stock"].append(route)
        else:
            categories["catalog"].append(route)

    return categories


# Service metadata
SERVICE_METADATA = {
    "service_name": "product_service",
    "version": "1.0.0",
    "tags": ["v1", "product", "catalog"],
    "capabilities": [
        "product_catalog",
        "sku_lookup",
        "stock_management",
        "availability_check",
    ]
}
