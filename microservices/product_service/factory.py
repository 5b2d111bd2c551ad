"""
Product Service Factory

Wires ProductService to the in-memory catalog repository.
Tests build the service directly with their own repository and event bus.

Usage:
    from .factory import create_product_service
    service = await create_product_service(config, event_bus)
"""
from typing import Optional

from core.config_manager import ConfigManager

from .product_service import ProductService


async def create_product_service(
    config: Optional[ConfigManager] = None,
    event_bus=None,
) -> ProductService:
    """
    Build and initialize the catalog service.

    Args:
        config: Configuration manager handed to the repository
        event_bus: Optional NATS event bus; None disables publishing
    """
    # Concrete repository stays out of module scope
    from .product_repository import ProductRepository

    repository = ProductRepository(config=config)
    await repository.initialize()

    return ProductService(repository=repository, event_bus=event_bus)
