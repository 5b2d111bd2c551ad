"""
Product Service Business Logic

Catalog management: create, look up, update and remove products, and move
their stock.
"""

import logging
from typing import Any, Dict, List, Optional

from .models import (
    DuplicateProductError,
    Product,
    ProductCreateRequest,
    ProductNotFoundError,
    ProductUpdateRequest,
)
from .protocols import EventBusProtocol, ProductRepositoryProtocol
from .events.publishers import (
    publish_out_of_stock,
    publish_product_created,
    publish_product_deleted,
    publish_product_updated,
    publish_stock_changed,
)

logger = logging.getLogger(__name__)


class ProductService:
    """Product catalog business logic"""

    def __init__(
        self,
        repository: ProductRepositoryProtocol,
        event_bus: Optional[EventBusProtocol] = None,
    ):
        """
        Initialize Product Service

        Args:
            repository: Product repository instance
            event_bus: NATS event bus instance (optional)
        """
        self.repository = repository
        self.event_bus = event_bus

        logger.info("ProductService initialized")

    # ====================
    # Catalog
    # ====================

    async def create(self, request: ProductCreateRequest) -> Product:
        """
        Add a product to the catalog.

        Raises:
            DuplicateProductError: SKU already used by another product
            ProductValidationError: price, stock, name or SKU invalid
        """
        if await self.repository.exists_by_sku(request.sku):
            raise DuplicateProductError(f"Product with SKU {request.sku} already exists")

        product = Product.create(
            name=request.name,
            description=request.description,
            price=request.price,
            stock=request.stock,
            sku=request.sku,
            category=request.category,
            is_active=True if request.is_active is None else request.is_active,
        )

        saved = await self.repository.save(product)
        logger.info(f"Created product {saved.id} (SKU {saved.sku})")

        await publish_product_created(self.event_bus, saved)
        return saved

    async def find_all(self) -> List[Product]:
        return await self.repository.find_all()

    async def find_by_category(self, category: str) -> List[Product]:
        return await self.repository.find_by_category(category)

    async def find_one(self, product_id: str) -> Product:
        product = await self.repository.find_by_id(product_id)
        if not product:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")
        return product

    async def find_by_sku(self, sku: str) -> Product:
        product = await self.repository.find_by_sku(sku)
        if not product:
            raise ProductNotFoundError(f"Product with SKU {sku} not found")
        return product

    async def update(self, product_id: str, request: ProductUpdateRequest) -> Product:
        """Apply the fields set on the request; others keep their value"""
        product = await self.find_one(product_id)
        changes = request.model_dump(exclude_unset=True)

        new_sku = changes.get("sku")
        if new_sku and new_sku != product.sku:
            existing = await self.repository.find_by_sku(new_sku)
            if existing and existing.id != product_id:
                raise DuplicateProductError(f"Product with SKU {new_sku} already exists")

        updated = product.update(**changes)
        saved = await self.repository.save(updated)
        logger.info(f"Updated product {product_id}: {sorted(changes)}")

        await publish_product_updated(self.event_bus, saved, sorted(changes))
        if saved.stock != product.stock:
            await self._stock_moved(saved, product.stock)
        return saved

    async def remove(self, product_id: str) -> None:
        product = await self.find_one(product_id)
        await self.repository.delete(product_id)
        logger.info(f"Removed product {product_id}")

        await publish_product_deleted(self.event_bus, product)

    # ====================
    # Stock
    # ====================

    async def increase_stock(self, product_id: str, quantity: int) -> Product:
        product = await self.find_one(product_id)
        saved = await self.repository.save(product.increase_stock(quantity))

        await self._stock_moved(saved, product.stock)
        return saved

    async def decrease_stock(self, product_id: str, quantity: int) -> Product:
        product = await self.find_one(product_id)
        saved = await self.repository.save(product.decrease_stock(quantity))

        await self._stock_moved(saved, product.stock)
        return saved

    async def check_availability(self, product_id: str, quantity: int) -> Dict[str, Any]:
        product = await self.find_one(product_id)
        return {
            "product_id": product.id,
            "quantity": quantity,
            "stock": product.stock,
            "is_active": product.is_active,
            "available": product.can_be_purchased(quantity),
        }

    async def _stock_moved(self, product: Product, previous_stock: int) -> None:
        await publish_stock_changed(self.event_bus, product, previous_stock)
        if product.stock == 0:
            logger.warning(f"Product {product.id} (SKU {product.sku}) is out of stock")
            await publish_out_of_stock(self.event_bus, product)
