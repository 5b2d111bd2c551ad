"""
Product Service Event Publishers

Functions to publish events from product service
"""

import logging
from typing import Any, Dict, List, Optional

from core.nats_client import Event, EventType, ServiceSource

from ..models import Product
from .models import (
    ProductCreatedEvent,
    ProductDeletedEvent,
    ProductOutOfStockEvent,
    ProductStockChangedEvent,
    ProductUpdatedEvent,
)

logger = logging.getLogger(__name__)


async def publish_product_created(
    event_bus,
    product: Product,
    metadata: Optional[Dict[str, Any]] = None
) -> bool:
    """
    Publish product.created event

    Args:
        event_bus: NATS event bus instance
        product: The saved product
        metadata: Additional metadata (optional)

    Returns:
        True if published successfully, False otherwise
    """
    if not event_bus:
        logger.warning("Event bus not available, skipping product.created event")
        return False

    try:
        event_data = ProductCreatedEvent(
            product_id=product.id,
            sku=product.sku,
            name=product.name,
            category=product.category,
            price=product.price,
            stock=product.stock,
            is_active=product.is_active,
            metadata=metadata or {}
        )

        event = Event(
            event_type=EventType.PRODUCT_CREATED,
            source=ServiceSource.PRODUCT_SERVICE,
            data=event_data.model_dump(mode="json")
        )

        published = await event_bus.publish_event(event)
        if published is False:
            logger.warning(f"Event bus rejected product.created event for product {product.id}")
            return False

        logger.info(f"Published product.created event for product {product.id}")
        return True

    except Exception as e:
        logger.error(f"Failed to publish product.created event: {e}")
        return False


async def publish_product_updated(
    event_bus,
    product: Product,
    updated_fields: List[str],
    metadata: Optional[Dict[str, Any]] = None
) -> bool:
    """Publish product.updated event"""
    if not event_bus:
        logger.warning("Event bus not available, skipping product.updated event")
        return False

    try:
        event_data = ProductUpdatedEvent(
            product_id=product.id,
            sku=product.sku,
            updated_fields=updated_fields,
            metadata=metadata or {}
        )

        event = Event(
            event_type=EventType.PRODUCT_UPDATED,
            source=ServiceSource.PRODUCT_SERVICE,
            data=event_data.model_dump(mode="json")
        )

        published = await event_bus.publish_event(event)
        if published is False:
            logger.warning(f"Event bus rejected product.updated event for product {product.id}")
            return False

        logger.info(f"Published product.updated event for product {product.id}")
        return True

    except Exception as e:
        logger.error(f"Failed to publish product.updated event: {e}")
        return False


async def publish_product_deleted(
    event_bus,
    product: Product,
    metadata: Optional[Dict[str, Any]] = None
) -> bool:
    """Publish product.deleted event"""
    if not event_bus:
        logger.warning("Event bus not available, skipping product.deleted event")
        return False

    try:
        event_data = ProductDeletedEvent(
            product_id=product.id,
            sku=product.sku,
            metadata=metadata or {}
        )

        event = Event(
            event_type=EventType.PRODUCT_DELETED,
            source=ServiceSource.PRODUCT_SERVICE,
            data=event_data.model_dump(mode="json")
        )

        published = await event_bus.publish_event(event)
        if published is False:
            logger.warning(f"Event bus rejected product.deleted event for product {product.id}")
            return False

        logger.info(f"Published product.deleted event for product {product.id}")
        return True

    except Exception as e:
        logger.error(f"Failed to publish product.deleted event: {e}")
        return False


async def publish_stock_changed(
    event_bus,
    product: Product,
    previous_stock: int,
    metadata: Optional[Dict[str, Any]] = None
) -> bool:
    """
    Publish product.stock_changed event

    Args:
        event_bus: NATS event bus instance
        product: Product after the stock change
        previous_stock: Stock before the change
        metadata: Additional metadata (optional)
    """
    if not event_bus:
        logger.warning("Event bus not available, skipping product.stock_changed event")
        return False

    try:
        event_data = ProductStockChangedEvent(
            product_id=product.id,
            sku=product.sku,
            previous_stock=previous_stock,
            new_stock=product.stock,
            delta=product.stock - previous_stock,
            metadata=metadata or {}
        )

        event = Event(
            event_type=EventType.PRODUCT_STOCK_CHANGED,
            source=ServiceSource.PRODUCT_SERVICE,
            data=event_data.model_dump(mode="json")
        )

        published = await event_bus.publish_event(event)
        if published is False:
            logger.warning(f"Event bus rejected product.stock_changed event for product {product.id}")
            return False

        logger.info(f"Published product.stock_changed event for product {product.id}")
        return True

    except Exception as e:
        logger.error(f"Failed to publish product.stock_changed event: {e}")
        return False


async def publish_out_of_stock(
    event_bus,
    product: Product,
    metadata: Optional[Dict[str, Any]] = None
) -> bool:
    """Publish product.out_of_stock event"""
    if not event_bus:
        logger.warning("Event bus not available, skipping product.out_of_stock event")
        return False

    try:
        event_data = ProductOutOfStockEvent(
            product_id=product.id,
            sku=product.sku,
            name=product.name,
            metadata=metadata or {}
        )

        event = Event(
            event_type=EventType.PRODUCT_OUT_OF_STOCK,
            source=ServiceSource.PRODUCT_SERVICE,
            data=event_data.model_dump(mode="json")
        )

        published = await event_bus.publish_event(event)
        if published is False:
            logger.warning(f"Event bus rejected product.out_of_stock event for product {product.id}")
            return False

        logger.info(f"Published product.out_of_stock event for product {product.id}")
        return True

    except Exception as e:
        logger.error(f"Failed to publish product.out_of_stock event: {e}")
        return False
