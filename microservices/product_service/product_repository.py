"""
Product Repository

In-memory product store keyed by product id.
"""

import logging
from typing import Dict, List, Optional

from core.config_manager import ConfigManager

from .models import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """Product data access - in-memory"""

    def __init__(self, config: Optional[ConfigManager] = None):
        self.config = config
        self._products: Dict[str, Product] = {}

    async def initialize(self):
        """Initialize repository (placeholder for consistency with other services)"""
        logger.info("Product repository initialized (in-memory)")

    async def close(self):
        """Close repository"""
        logger.info("Product repository closed")

    async def save(self, product: Product) -> Product:
        self._products[product.id] = product
        return product

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    async def find_by_sku(self, sku: str) -> Optional[Product]:
        return next((p for p in self._products.values() if p.sku == sku), None)

    async def find_all(self) -> List[Product]:
        return list(self._products.values())

    async def find_by_category(self, category: str) -> List[Product]:
        return [p for p in self._products.values() if p.category == category]

    async def exists_by_sku(self, sku: str) -> bool:
        return await self.find_by_sku(sku) is not None

    async def delete(self, product_id: str) -> None:
        self._products.pop(product_id, None)

    async def clear(self) -> None:
        self._products.clear()
