"""
Inventory Service Data Models

InventorySKU is the stock line for one SKU code in one warehouse. It checks
its own invariants on construction and on every stock movement:

    0 <= reserved_quantity <= quantity
    min_stock_level <= max_stock_level

Request/response schemas for the HTTP layer are Pydantic models.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


# ====================
# Domain errors
# ====================

class InventoryServiceError(Exception):
    """Base exception for inventory service errors"""
    pass


class InventoryValidationError(InventoryServiceError, ValueError):
    """An inventory invariant or input rule was violated"""
    pass


class InsufficientStockError(InventoryValidationError):
    """Not enough available (or reserved) stock for the movement"""
    pass


class DuplicateSKUError(InventoryServiceError):
    """SKU code already exists in the warehouse"""
    pass


class SKUNotFoundError(InventoryServiceError):
    """SKU not found"""
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ====================
# Entity
# ====================

class InventorySKU:
    """Stock record for a SKU code in a warehouse"""

    def __init__(
        self,
        sku_code: str,
        product_id: str,
        warehouse_id: str,
        quantity: int,
        reserved_quantity: int = 0,
        min_stock_level: int = 0,
        max_stock_level: int = 0,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._validate(
            sku_code, product_id, warehouse_id,
            quantity, reserved_quantity, min_stock_level, max_stock_level,
        )

        self._id = id or str(uuid.uuid4())
        self._sku_code = sku_code
        self._product_id = product_id
        self._warehouse_id = warehouse_id
        self._quantity = quantity
        self._reserved_quantity = reserved_quantity
        self._min_stock_level = min_stock_level
        self._max_stock_level = max_stock_level
        self._created_at = created_at or _utcnow()
        self._updated_at = updated_at or _utcnow()

    @staticmethod
    def _validate(
        sku_code: str,
        product_id: str,
        warehouse_id: str,
        quantity: int,
        reserved_quantity: int,
        min_stock_level: int,
        max_stock_level: int,
    ) -> None:
        if not sku_code or not sku_code.strip():
            raise InventoryValidationError("SKU code is required")
        if not product_id or not product_id.strip():
            raise InventoryValidationError("Product ID is required")
        if not warehouse_id or not warehouse_id.strip():
            raise InventoryValidationError("Warehouse ID is required")
        if quantity < 0:
            raise InventoryValidationError("Quantity cannot be negative")
        if reserved_quantity < 0:
            raise InventoryValidationError("Reserved quantity cannot be negative")
        if reserved_quantity > quantity:
            raise InventoryValidationError("Reserved quantity cannot exceed total quantity")
        if min_stock_level > max_stock_level:
            raise InventoryValidationError("Min stock level cannot exceed max stock level")

    # ---- read-only attributes ----

    @property
    def id(self) -> str:
        return self._id

    @property
    def sku_code(self) -> str:
        return self._sku_code

    @property
    def product_id(self) -> str:
        return self._product_id

    @property
    def warehouse_id(self) -> str:
        return self._warehouse_id

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def reserved_quantity(self) -> int:
        return self._reserved_quantity

    @property
    def available_quantity(self) -> int:
        return self._quantity - self._reserved_quantity

    @property
    def min_stock_level(self) -> int:
        return self._min_stock_level

    @property
    def max_stock_level(self) -> int:
        return self._max_stock_level

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # ---- stock status ----

    def is_low_stock(self) -> bool:
        return self._quantity < self._min_stock_level

    def is_over_stock(self) -> bool:
        return self._quantity > self._max_stock_level

    # ---- stock movements ----

    def add_stock(self, quantity: int) -> None:
        """Receive stock into the warehouse"""
        if quantity <= 0:
            raise InventoryValidationError("Add quantity must be positive")

        self._quantity += quantity
        self._touch()

    def remove_stock(self, quantity: int) -> None:
        """Take unreserved stock out of the warehouse"""
        if quantity <= 0:
            raise InventoryValidationError("Remove quantity must be positive")
        if quantity > self.available_quantity:
            raise InsufficientStockError("Insufficient available stock")

        self._quantity -= quantity
        self._touch()

    def reserve_stock(self, quantity: int) -> None:
        """Hold available stock for a pending order"""
        if quantity <= 0:
            raise InventoryValidationError("Reserve quantity must be positive")
        if quantity > self.available_quantity:
            raise InsufficientStockError("Insufficient available stock for reservation")

        self._reserved_quantity += quantity
        self._touch()

    def release_reservation(self, quantity: int) -> None:
        """Give reserved stock back to the available pool"""
        if quantity <= 0:
            raise InventoryValidationError("Release quantity must be positive")
        if quantity > self._reserved_quantity:
            raise InsufficientStockError("Cannot release more than reserved quantity")

        self._reserved_quantity -= quantity
        self._touch()

    def _touch(self) -> None:
        self._updated_at = _utcnow()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "sku_code": self._sku_code,
            "product_id": self._product_id,
            "warehouse_id": self._warehouse_id,
            "quantity": self._quantity,
            "reserved_quantity": self._reserved_quantity,
            "available_quantity": self.available_quantity,
            "min_stock_level": self._min_stock_level,
            "max_stock_level": self._max_stock_level,
            "is_low_stock": self.is_low_stock(),
            "is_over_stock": self.is_over_stock(),
            "created_at": self._created_at.isoformat(),
            "updated_at": self._updated_at.isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"InventorySKU(id={self._id!r}, sku_code={self._sku_code!r}, "
            f"warehouse_id={self._warehouse_id!r}, quantity={self._quantity}, "
            f"reserved_quantity={self._reserved_quantity})"
        )


# ====================
# Request models
# ====================

def _not_bool(value: Any) -> Any:
    # bool is an int subclass; numeric strings stay accepted
    if isinstance(value, bool):
        raise ValueError("must be a number")
    return value


class CreateInventorySKURequest(BaseModel):
    """Create SKU request"""
    sku_code: str = Field(..., description="SKU code, unique per warehouse")
    product_id: str = Field(..., description="Referenced product ID")
    warehouse_id: str = Field(..., description="Warehouse holding the stock")
    quantity: int = Field(..., ge=0, description="On-hand quantity")
    reserved_quantity: int = Field(default=0, ge=0, description="Quantity held for orders")
    min_stock_level: int = Field(..., ge=0, description="Low stock threshold")
    max_stock_level: int = Field(..., ge=0, description="Over stock threshold")

    @field_validator("sku_code", "product_id", "warehouse_id")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty")
        return v

    @field_validator("quantity", "reserved_quantity", "min_stock_level", "max_stock_level", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        return _not_bool(v)


class StockQuantityRequest(BaseModel):
    """Quantity for receive / remove / reserve / release operations"""
    quantity: int = Field(..., gt=0, description="Units to move")

    @field_validator("quantity", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        return _not_bool(v)


# ====================
# Response models
# ====================

class InventorySKUData(BaseModel):
    """Serialized SKU"""
    id: str
    sku_code: str
    product_id: str
    warehouse_id: str
    quantity: int
    reserved_quantity: int
    available_quantity: int
    min_stock_level: int
    max_stock_level: int
    is_low_stock: bool
    is_over_stock: bool
    created_at: str
    updated_at: str


class SKUResponse(BaseModel):
    """Single SKU envelope"""
    success: bool = True
    data: InventorySKUData


class SKUListResponse(BaseModel):
    """SKU list envelope"""
    success: bool = True
    data: List[InventorySKUData] = Field(default_factory=list)
    count: int = 0
