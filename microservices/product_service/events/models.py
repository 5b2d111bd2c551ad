"""
Product Service Event Models

Pydantic models for events published by product service
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# =============================================================================
# Event Type Definitions (Service-Specific)
# =============================================================================

class ProductEventType(str, Enum):
    """
    Events published by product_service.

    Subjects: product.>
    """
    PRODUCT_CREATED = "product.created"
    PRODUCT_UPDATED = "product.updated"
    PRODUCT_DELETED = "product.deleted"
    STOCK_CHANGED = "product.stock_changed"
    OUT_OF_STOCK = "product.out_of_stock"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductCreatedEvent(BaseModel):
    """Event published when a product is added to the catalog"""
    product_id: str
    sku: str
    name: str
    category: str
    price: float
    stock: int
    is_active: bool
    timestamp: datetime = Field(default_factory=_utcnow)
    metadata: Optional[Dict[str, Any]] = None


class ProductUpdatedEvent(BaseModel):
    """Event published when product fields change"""
    product_id: str
    sku: str
    updated_fields: List[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=_utcnow)
    metadata: Optional[Dict[str, Any]] = None


class ProductDeletedEvent(BaseModel):
    """Event published when a product is removed"""
    product_id: str
    sku: str
    timestamp: datetime = Field(default_factory=_utcnow)
    metadata: Optional[Dict[str, Any]] = None


class ProductStockChangedEvent(BaseModel):
    """Event published when stock goes up or down"""
    product_id: str
    sku: str
    previous_stock: int
    new_stock: int
    delta: int
    timestamp: datetime = Field(default_factory=_utcnow)
    metadata: Optional[Dict[str, Any]] = None


class ProductOutOfStockEvent(BaseModel):
    """Event published when stock reaches zero"""
    product_id: str
    sku: str
    name: str
    timestamp: datetime = Field(default_factory=_utcnow)
    metadata: Optional[Dict[str, Any]] = None
