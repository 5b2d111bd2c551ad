"""
Inventory Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, List, Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import (
    InventorySKU,
    InventoryServiceError,
    InventoryValidationError,
    InsufficientStockError,
    DuplicateSKUError,
    SKUNotFoundError,
)

__all__ = [
    "InventorySKURepositoryProtocol",
    "EventBusProtocol",
    "InventoryServiceError",
    "InventoryValidationError",
    "InsufficientStockError",
    "DuplicateSKUError",
    "SKUNotFoundError",
]


@runtime_checkable
class InventorySKURepositoryProtocol(Protocol):
    """
    Interface for the SKU repository.

    Implementations must provide these methods.
    Used for dependency injection to enable testing.
    """

    async def save(self, sku: InventorySKU) -> InventorySKU:
        """Insert or overwrite a SKU by id"""
        ...

    async def find_by_id(self, sku_id: str) -> Optional[InventorySKU]:
        ...

    async def find_by_sku_code(self, sku_code: str) -> Optional[InventorySKU]:
        ...

    async def find_by_sku_code_and_warehouse(
        self, sku_code: str, warehouse_id: str
    ) -> Optional[InventorySKU]:
        ...

    async def find_by_warehouse(self, warehouse_id: str) -> List[InventorySKU]:
        ...

    async def find_by_product_id(self, product_id: str) -> List[InventorySKU]:
        ...

    async def find_all(self) -> List[InventorySKU]:
        ...

    async def delete(self, sku_id: str) -> None:
        ...

    # ==================== Lifecycle Operations ====================

    async def initialize(self) -> None:
        """Initialize repository"""
        ...

    async def close(self) -> None:
        """Close repository"""
        ...


@runtime_checkable
class EventBusProtocol(Protocol):
    """Interface for Event Bus - no I/O imports"""

    async def publish_event(self, event: Any) -> bool:
        """Publish an event"""
        ...

    async def close(self) -> None:
        """Close event bus connection"""
        ...
