#!/usr/bin/env python3
"""Modular configuration system for the commerce microservices

Configuration hierarchy:
- service_config: Per-service binding, debug and event bus settings
- logging_config: Logging configuration
"""
from .logging_config import LoggingConfig
from .service_config import SERVICE_PORTS, ServiceConfig

__all__ = [
    'LoggingConfig',
    'ServiceConfig',
    'SERVICE_PORTS',
]
