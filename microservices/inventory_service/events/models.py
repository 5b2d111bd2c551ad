"""
Inventory Service Event Models

Pydantic models for events published by inventory service
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Event Type Definitions (Service-Specific)
# =============================================================================

class InventoryEventType(str, Enum):
    """
    Events published by inventory_service.

    Subjects: inventory.>
    """
    SKU_CREATED = "inventory.sku_created"
    SKU_DELETED = "inventory.sku_deleted"
    STOCK_RECEIVED = "inventory.stock_received"
    STOCK_REMOVED = "inventory.stock_removed"
    STOCK_RESERVED = "inventory.stock_reserved"
    RESERVATION_RELEASED = "inventory.reservation_released"
    STOCK_DEPLETED = "inventory.stock_depleted"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Event Data Models
# =============================================================================

class SKUCreatedEvent(BaseModel):
    """Event published when a SKU is registered in a warehouse"""
    sku_id: str
    sku_code: str
    product_id: str
    warehouse_id: str
    quantity: int
    metadata: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=_utcnow)


class StockMovementEvent(BaseModel):
    """Event published for receive / remove / reserve / release"""
    sku_id: str
    sku_code: str
    warehouse_id: str
    quantity: int = Field(..., description="Units moved by the operation")
    on_hand: int
    reserved: int
    available: int
    metadata: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=_utcnow)


class StockDepletedEvent(BaseModel):
    """Event published when no unreserved stock is left"""
    sku_id: str
    sku_code: str
    product_id: str
    warehouse_id: str
    metadata: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=_utcnow)


class SKUDeletedEvent(BaseModel):
    """Event published when a SKU is removed"""
    sku_id: str
    sku_code: str
    warehouse_id: str
    metadata: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=_utcnow)
