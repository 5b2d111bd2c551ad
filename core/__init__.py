#!/usr/bin/env python3
"""
Core Module for the Commerce Microservices

Shared components for the inventory and product services.

COMPONENTS:
    - config/: Dataclass configuration sections loaded from the environment
    - config_manager.py: Per-service configuration entry point
    - logger.py: Service logger setup
    - nats_client.py: Optional NATS event bus

USAGE:
    from core.config_manager import ConfigManager

    # Initialize configuration for a service
    config = ConfigManager("service_name")
"""

from .config_manager import ConfigManager, Environment, create_config
from .config import ServiceConfig

__all__ = [
    "ConfigManager",
    "Environment",
    "ServiceConfig",
    "create_config",
]

__version__ = "1.0.0"
