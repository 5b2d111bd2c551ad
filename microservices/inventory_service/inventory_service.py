"""
Inventory Service Business Logic

Use cases for SKU stock records: registration, lookup, stock movements
and reservations. Persistence goes through the repository protocol and
domain events through an optional event bus.
"""

import logging
from typing import List, Optional

from .models import (
    CreateInventorySKURequest,
    DuplicateSKUError,
    InventorySKU,
    SKUNotFoundError,
)
from .protocols import EventBusProtocol, InventorySKURepositoryProtocol
from .events.models import InventoryEventType
from .events.publishers import (
    publish_sku_created,
    publish_sku_deleted,
    publish_stock_depleted,
    publish_stock_movement,
)

logger = logging.getLogger(__name__)


class InventorySKUService:
    """Inventory SKU business logic"""

    def __init__(
        self,
        repository: InventorySKURepositoryProtocol,
        event_bus: Optional[EventBusProtocol] = None,
    ):
        """
        Initialize Inventory SKU Service

        Args:
            repository: SKU repository instance
            event_bus: NATS event bus instance (optional)
        """
        self.repository = repository
        self.event_bus = event_bus

        logger.info("InventorySKUService initialized")

    # ====================
    # SKU lifecycle
    # ====================

    async def create_sku(self, request: CreateInventorySKURequest) -> InventorySKU:
        """
        Register a SKU in a warehouse.

        Raises:
            DuplicateSKUError: the code already exists in that warehouse
            InventoryValidationError: the stock levels are inconsistent
        """
        existing = await self.repository.find_by_sku_code_and_warehouse(
            request.sku_code, request.warehouse_id
        )
        if existing:
            raise DuplicateSKUError("SKU code already exists")

        sku = InventorySKU(
            sku_code=request.sku_code,
            product_id=request.product_id,
            warehouse_id=request.warehouse_id,
            quantity=request.quantity,
            reserved_quantity=request.reserved_quantity or 0,
            min_stock_level=request.min_stock_level,
            max_stock_level=request.max_stock_level,
        )

        saved = await self.repository.save(sku)
        logger.info(f"Created SKU {saved.sku_code} in warehouse {saved.warehouse_id} ({saved.id})")

        await publish_sku_created(self.event_bus, saved)
        return saved

    async def get_sku(self, sku_id: str) -> InventorySKU:
        sku = await self.repository.find_by_id(sku_id)
        if not sku:
            raise SKUNotFoundError(f"SKU with ID {sku_id} not found")
        return sku

    async def get_sku_by_code(
        self, sku_code: str, warehouse_id: Optional[str] = None
    ) -> InventorySKU:
        """Look up a SKU by code, scoped to a warehouse when one is given"""
        if warehouse_id:
            sku = await self.repository.find_by_sku_code_and_warehouse(sku_code, warehouse_id)
        else:
            sku = await self.repository.find_by_sku_code(sku_code)

        if not sku:
            raise SKUNotFoundError(f"SKU with code {sku_code} not found")
        return sku

    async def list_skus(
        self,
        warehouse_id: Optional[str] = None,
        product_id: Optional[str] = None,
        low_stock_only: bool = False,
    ) -> List[InventorySKU]:
        if warehouse_id:
            skus = await self.repository.find_by_warehouse(warehouse_id)
        elif product_id:
            skus = await self.repository.find_by_product_id(product_id)
        else:
            skus = await self.repository.find_all()

        # Both filters may be given together
        if warehouse_id and product_id:
            skus = [sku for sku in skus if sku.product_id == product_id]
        if low_stock_only:
            skus = [sku for sku in skus if sku.is_low_stock()]
        return skus

    async def delete_sku(self, sku_id: str) -> None:
        sku = await self.get_sku(sku_id)
        await self.repository.delete(sku_id)
        logger.info(f"Deleted SKU {sku.sku_code} ({sku_id})")

        await publish_sku_deleted(self.event_bus, sku)

    # ====================
    # Stock movements
    # ====================

    async def receive_stock(self, sku_id: str, quantity: int) -> InventorySKU:
        sku = await self.get_sku(sku_id)
        sku.add_stock(quantity)
        saved = await self.repository.save(sku)

        await publish_stock_movement(
            self.event_bus, InventoryEventType.STOCK_RECEIVED, saved, quantity
        )
        return saved

    async def remove_stock(self, sku_id: str, quantity: int) -> InventorySKU:
        sku = await self.get_sku(sku_id)
        sku.remove_stock(quantity)
        saved = await self.repository.save(sku)

        await publish_stock_movement(
            self.event_bus, InventoryEventType.STOCK_REMOVED, saved, quantity
        )
        await self._check_depleted(saved)
        return saved

    async def reserve_stock(self, sku_id: str, quantity: int) -> InventorySKU:
        sku = await self.get_sku(sku_id)
        sku.reserve_stock(quantity)
        saved = await self.repository.save(sku)

        await publish_stock_movement(
            self.event_bus, InventoryEventType.STOCK_RESERVED, saved, quantity
        )
        await self._check_depleted(saved)
        return saved

    async def release_reservation(self, sku_id: str, quantity: int) -> InventorySKU:
        sku = await self.get_sku(sku_id)
        sku.release_reservation(quantity)
        saved = await self.repository.save(sku)

        await publish_stock_movement(
            self.event_bus, InventoryEventType.RESERVATION_RELEASED, saved, quantity
        )
        return saved

    async def _check_depleted(self, sku: InventorySKU) -> None:
        if sku.available_quantity == 0:
            logger.warning(f"SKU {sku.sku_code} in warehouse {sku.warehouse_id} has no available stock")
            await publish_stock_depleted(self.event_bus, sku)
