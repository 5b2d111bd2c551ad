"""
Inventory Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that imports the concrete repository.

Usage:
    from .factory import create_inventory_service
    service = await create_inventory_service(config, event_bus)
"""
from typing import Optional

from core.config_manager import ConfigManager

from .inventory_service import InventorySKUService


async def create_inventory_service(
    config: Optional[ConfigManager] = None,
    event_bus=None,
) -> InventorySKUService:
    """
    Create InventorySKUService with real dependencies.

    Args:
        config: Configuration manager
        event_bus: Event bus for publishing events

    Returns:
        Configured InventorySKUService instance
    """
    # Import real repository here (not at module level)
    from .inventory_repository import InventorySKURepository

    repository = InventorySKURepository(config=config)
    await repository.initialize()

    return InventorySKUService(repository=repository, event_bus=event_bus)
