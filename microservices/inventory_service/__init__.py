"""
Inventory Service Microservice

SKU stock levels and reservations per warehouse
"""

from .inventory_service import InventorySKUService
from .inventory_repository import InventorySKURepository
from .models import (
    InventorySKU,
    CreateInventorySKURequest,
    StockQuantityRequest,
    InventoryServiceError,
    InventoryValidationError,
    InsufficientStockError,
    DuplicateSKUError,
    SKUNotFoundError,
)

__version__ = "1.0.0"
__all__ = [
    "InventorySKUService",
    "InventorySKURepository",
    "InventorySKU",
    "CreateInventorySKURequest",
    "StockQuantityRequest",
    "InventoryServiceError",
    "InventoryValidationError",
    "InsufficientStockError",
    "DuplicateSKUError",
    "SKUNotFoundError",
]
