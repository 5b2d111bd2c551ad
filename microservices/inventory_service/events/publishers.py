"""
Inventory Service Event Publishers

Functions to publish events from inventory service.
Every publisher returns False instead of raising, so a broken or missing
event bus never fails a stock operation.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel

from core.nats_client import Event, ServiceSource

from ..models import InventorySKU
from .models import (
    InventoryEventType,
    SKUCreatedEvent,
    SKUDeletedEvent,
    StockDepletedEvent,
    StockMovementEvent,
)

logger = logging.getLogger(__name__)


async def _publish(event_bus, event_type: InventoryEventType, payload: BaseModel) -> bool:
    if not event_bus:
        logger.warning(f"Event bus not available, skipping {event_type.value} event")
        return False

    try:
        event = Event(
            event_type=event_type.value,
            source=ServiceSource.INVENTORY_SERVICE,
            data=payload.model_dump(mode="json"),
        )
        published = await event_bus.publish_event(event)
        if published is False:
            logger.warning(f"Event bus rejected {event_type.value} event")
            return False
        logger.info(f"Published {event_type.value} event")
        return True

    except Exception as e:
        logger.error(f"Failed to publish {event_type.value} event: {e}")
        return False


async def publish_sku_created(
    event_bus,
    sku: InventorySKU,
    metadata: Optional[Dict[str, Any]] = None,
) -> bool:
    """Publish inventory.sku_created event"""
    return await _publish(
        event_bus,
        InventoryEventType.SKU_CREATED,
        SKUCreatedEvent(
            sku_id=sku.id,
            sku_code=sku.sku_code,
            product_id=sku.product_id,
            warehouse_id=sku.warehouse_id,
            quantity=sku.quantity,
            metadata=metadata or {},
        ),
    )


async def publish_stock_movement(
    event_bus,
    event_type: InventoryEventType,
    sku: InventorySKU,
    quantity: int,
    metadata: Optional[Dict[str, Any]] = None,
) -> bool:
    """Publish stock_received / stock_removed / stock_reserved / reservation_released"""
    return await _publish(
        event_bus,
        event_type,
        StockMovementEvent(
            sku_id=sku.id,
            sku_code=sku.sku_code,
            warehouse_id=sku.warehouse_id,
            quantity=quantity,
            on_hand=sku.quantity,
            reserved=sku.reserved_quantity,
            available=sku.available_quantity,
            metadata=metadata or {},
        ),
    )


async def publish_stock_depleted(
    event_bus,
    sku: InventorySKU,
    metadata: Optional[Dict[str, Any]] = None,
) -> bool:
    """Publish inventory.stock_depleted event"""
    return await _publish(
        event_bus,
        InventoryEventType.STOCK_DEPLETED,
        StockDepletedEvent(
            sku_id=sku.id,
            sku_code=sku.sku_code,
            product_id=sku.product_id,
            warehouse_id=sku.warehouse_id,
            metadata=metadata or {},
        ),
    )


async def publish_sku_deleted(
    event_bus,
    sku: InventorySKU,
    metadata: Optional[Dict[str, Any]] = None,
) -> bool:
    """Publish inventory.sku_deleted event"""
    return await _publish(
        event_bus,
        InventoryEventType.SKU_DELETED,
        SKUDeletedEvent(
            sku_id=sku.id,
            sku_code=sku.sku_code,
            warehouse_id=sku.warehouse_id,
            metadata=metadata or {},
        ),
    )
