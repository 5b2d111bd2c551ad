"""
Product Service Data Models

Product is an immutable value: every change (update, stock movement)
returns a new instance, validated the same way as on creation.
"""

import uuid
from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ====================
# Domain errors
# ====================

class ProductServiceError(Exception):
    """Base exception for product service errors"""
    pass


class ProductValidationError(ProductServiceError, ValueError):
    """Product invariant violated"""
    pass


class DuplicateProductError(ProductServiceError):
    """Another product already uses the SKU"""
    pass


class ProductNotFoundError(ProductServiceError):
    """Product not found"""
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ====================
# Entity
# ====================

@dataclass(frozen=True)
class Product:
    """Catalog product"""
    id: str
    name: str
    description: str
    price: float
    stock: int
    sku: str
    category: str
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if self.price <= 0:
            raise ProductValidationError("Price must be greater than 0")
        if self.stock < 0:
            raise ProductValidationError("Stock cannot be negative")
        if not self.name or not self.name.strip():
            raise ProductValidationError("Product name is required")
        if not self.sku or not self.sku.strip():
            raise ProductValidationError("SKU is required")

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: float,
        stock: int,
        sku: str,
        category: str,
        is_active: bool = True,
    ) -> "Product":
        """New product with a generated id"""
        return cls(
            id=f"prod_{uuid.uuid4().hex[:12]}",
            name=name,
            description=description,
            price=price,
            stock=stock,
            sku=sku,
            category=category,
            is_active=is_active,
        )

    def update(self, **changes: Any) -> "Product":
        """
        Copy of the product with the given fields changed.

        None values keep the current value. id and created_at never change;
        updated_at is refreshed.
        """
        values = {
            key: value for key, value in changes.items()
            if value is not None and key not in ("id", "created_at", "updated_at")
        }
        return replace(self, **values, updated_at=_utcnow())

    def can_be_purchased(self, quantity: int) -> bool:
        return self.is_active and self.stock >= quantity

    def decrease_stock(self, quantity: int) -> "Product":
        if quantity <= 0:
            raise ProductValidationError("Quantity must be greater than 0")
        if self.stock < quantity:
            raise ProductValidationError("Insufficient stock")
        return self.update(stock=self.stock - quantity)

    def increase_stock(self, quantity: int) -> "Product":
        if quantity <= 0:
            raise ProductValidationError("Quantity must be greater than 0")
        return self.update(stock=self.stock + quantity)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat()
        return data


# ====================
# Request models
# ====================

def _max_two_decimals(value: float) -> float:
    if Decimal(str(value)).as_tuple().exponent < -2:
        raise ValueError("price must have at most 2 decimal places")
    return value


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("should not be empty")
    return value


class ProductCreateRequest(BaseModel):
    """Create product request"""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: float = Field(..., gt=0, strict=True, description="Unit price")
    stock: int = Field(..., ge=0, strict=True, description="Units in stock")
    sku: str = Field(..., description="Stock keeping unit, unique across products")
    category: str = Field(..., description="Catalog category")
    is_active: Optional[bool] = Field(None, description="Defaults to true")

    @field_validator("name", "description", "sku", "category")
    @classmethod
    def check_text(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("price")
    @classmethod
    def check_price(cls, v: float) -> float:
        return _max_two_decimals(v)


class ProductUpdateRequest(BaseModel):
    """Partial product update; only fields sent by the client are applied"""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0, strict=True)
    stock: Optional[int] = Field(None, ge=0, strict=True)
    sku: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "description", "sku", "category")
    @classmethod
    def check_text(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _not_blank(v)

    @field_validator("price")
    @classmethod
    def check_price(cls, v: Optional[float]) -> Optional[float]:
        return v if v is None else _max_two_decimals(v)


class StockChangeRequest(BaseModel):
    """Stock increase / decrease amount"""
    model_config = ConfigDict(extra="forbid")

    quantity: int = Field(..., gt=0, strict=True)


# ====================
# Response models
# ====================

class ProductResponse(BaseModel):
    """Serialized product"""
    id: str
    name: str
    description: str
    price: float
    stock: int
    sku: str
    category: str
    is_active: bool
    created_at: str
    updated_at: str


class AvailabilityResponse(BaseModel):
    """Purchase availability for a quantity"""
    product_id: str
    quantity: int
    stock: int
    is_active: bool
    available: bool
