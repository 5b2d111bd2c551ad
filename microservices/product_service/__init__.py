"""
Product Service Microservice

Product catalog with SKU lookup and stock management
"""

from .product_service import ProductService
from .product_repository import ProductRepository
from .models import (
    Product,
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductServiceError,
    ProductValidationError,
    DuplicateProductError,
    ProductNotFoundError,
)

__version__ = "1.0.0"
__all__ = [
    "ProductService",
    "ProductRepository",
    "Product",
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductServiceError",
    "ProductValidationError",
    "DuplicateProductError",
    "ProductNotFoundError",
]
