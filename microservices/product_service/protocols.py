"""
Product Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, List, Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import (
    Product,
    ProductServiceError,
    ProductValidationError,
    DuplicateProductError,
    ProductNotFoundError,
)

__all__ = [
    "ProductRepositoryProtocol",
    "EventBusProtocol",
    "ProductServiceError",
    "ProductValidationError",
    "DuplicateProductError",
    "ProductNotFoundError",
]


@runtime_checkable
class ProductRepositoryProtocol(Protocol):
    """
    Interface for Product Repository.

    Implementations must provide these methods.
    Used for dependency injection to enable testing.
    """

    # ==================== Product Operations ====================

    async def save(self, product: Product) -> Product:
        """Insert or replace a product by id"""
        ...

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        ...

    async def find_by_sku(self, sku: str) -> Optional[Product]:
        ...

    async def find_all(self) -> List[Product]:
        ...

    async def find_by_category(self, category: str) -> List[Product]:
        ...

    async def exists_by_sku(self, sku: str) -> bool:
        ...

    async def delete(self, product_id: str) -> None:
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
