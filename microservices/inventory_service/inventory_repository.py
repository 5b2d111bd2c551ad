"""
Inventory Repository

Data access layer for SKU stock records.
Backed by an in-memory dict keyed by SKU id; contents live as long as the
process does.
"""

import logging
from typing import Dict, List, Optional

from core.config_manager import ConfigManager

from .models import InventorySKU

logger = logging.getLogger(__name__)


class InventorySKURepository:
    """
    Repository for SKU stock records.

    Lookups are linear scans in insertion order.
    """

    def __init__(self, config: Optional[ConfigManager] = None):
        self.config = config
        self._skus: Dict[str, InventorySKU] = {}

        logger.info("InventorySKURepository initialized (in-memory)")

    async def initialize(self):
        """Initialize repository (placeholder for consistency with other services)"""
        logger.debug("InventorySKURepository ready")

    async def close(self):
        """Close repository"""
        logger.debug(f"InventorySKURepository closed with {len(self._skus)} SKUs")

    async def save(self, sku: InventorySKU) -> InventorySKU:
        """Insert or overwrite a SKU by id"""
        self._skus[sku.id] = sku
        return sku

    async def find_by_id(self, sku_id: str) -> Optional[InventorySKU]:
        return self._skus.get(sku_id)

    async def find_by_sku_code(self, sku_code: str) -> Optional[InventorySKU]:
        """First SKU with this code in any warehouse"""
        for sku in self._skus.values():
            if sku.sku_code == sku_code:
                return sku
        return None

    async def find_by_sku_code_and_warehouse(
        self, sku_code: str, warehouse_id: str
    ) -> Optional[InventorySKU]:
        for sku in self._skus.values():
            if sku.sku_code == sku_code and sku.warehouse_id == warehouse_id:
                return sku
        return None

    async def find_by_warehouse(self, warehouse_id: str) -> List[InventorySKU]:
        return [sku for sku in self._skus.values() if sku.warehouse_id == warehouse_id]

    async def find_by_product_id(self, product_id: str) -> List[InventorySKU]:
        return [sku for sku in self._skus.values() if sku.product_id == product_id]

    async def find_all(self) -> List[InventorySKU]:
        return list(self._skus.values())

    async def delete(self, sku_id: str) -> None:
        """Remove a SKU; unknown ids are ignored"""
        self._skus.pop(sku_id, None)

    async def clear(self) -> None:
        self._skus.clear()
