"""
Product Service Events Module

Exports all event-related functionality
"""

from .models import (
    ProductEventType,
    ProductCreatedEvent,
    ProductUpdatedEvent,
    ProductDeletedEvent,
    ProductStockChangedEvent,
    ProductOutOfStockEvent,
)

from .publishers import (
    publish_product_created,
    publish_product_updated,
    publish_product_deleted,
    publish_stock_changed,
    publish_out_of_stock,
)

__all__ = [
    # Event Types
    "ProductEventType",
    # Event Models
    "ProductCreatedEvent",
    "ProductUpdatedEvent",
    "ProductDeletedEvent",
    "ProductStockChangedEvent",
    "ProductOutOfStockEvent",
    # Publishers
    "publish_product_created",
    "publish_product_updated",
    "publish_product_deleted",
    "publish_stock_changed",
    "publish_out_of_stock",
]
