"""
Inventory Service Events Module

Exports all event-related functionality for inventory service
"""

from .models import (
    InventoryEventType,
    SKUCreatedEvent,
    SKUDeletedEvent,
    StockDepletedEvent,
    StockMovementEvent,
)

from .publishers import (
    publish_sku_created,
    publish_sku_deleted,
    publish_stock_depleted,
    publish_stock_movement,
)

__all__ = [
    # Event Types
    "InventoryEventType",
    # Event Models
    "SKUCreatedEvent",
    "SKUDeletedEvent",
    "StockDepletedEvent",
    "StockMovementEvent",
    # Publishers
    "publish_sku_created",
    "publish_sku_deleted",
    "publish_stock_depleted",
    "publish_stock_movement",
]
