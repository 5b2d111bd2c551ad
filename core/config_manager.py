#!/usr/bin/env python3
"""
Centralized configuration management for the commerce microservices.

Loads the environment file that matches ENV / ENVIRONMENT (values already in
the process environment win), then exposes a typed ServiceConfig per service.

Usage:
    from core.config_manager import ConfigManager

    config_manager = ConfigManager("inventory_service")
    config = config_manager.get_service_config()
"""
import logging
import os
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .config import ServiceConfig

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Deployment environment"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


_ENV_ALIASES = {
    "dev": Environment.DEVELOPMENT,
    "test": Environment.TESTING,
}

ENV_FILES = {
    Environment.DEVELOPMENT: "deployment/environments/dev.env",
    Environment.TESTING: "deployment/environments/test.env",
    Environment.STAGING: "deployment/environments/staging.env",
    Environment.PRODUCTION: "deployment/environments/production.env",
}

_SECRET_MARKERS = ("password", "secret", "token", "key")


def resolve_environment(value: Optional[str] = None) -> Environment:
    """Map an ENV / ENVIRONMENT value to an Environment; unknown values mean development"""
    if value is None:
        value = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
    value = value.strip().lower()
    if value in _ENV_ALIASES:
        return _ENV_ALIASES[value]
    try:
        return Environment(value)
    except ValueError:
        logger.warning(f"Unknown environment '{value}', using development")
        return Environment.DEVELOPMENT


class ConfigManager:
    """Configuration manager for a single microservice"""

    def __init__(self, service_name: str, env_file: Optional[str] = None):
        self.service_name = service_name
        self.environment = resolve_environment()

        env_file = env_file or ENV_FILES[self.environment]
        if os.path.exists(env_file):
            load_dotenv(env_file, override=False)
            logger.debug(f"Loaded environment file {env_file}")

        self._config: Optional[ServiceConfig] = None

    def get_service_config(self) -> ServiceConfig:
        """Get (and cache) the service configuration"""
        if self._config is None:
            self._config = ServiceConfig.from_env(self.service_name)
        return self._config

    def reload(self) -> ServiceConfig:
        """Re-read configuration from the environment"""
        self._config = ServiceConfig.from_env(self.service_name)
        return self._config

    def get_config_summary(self, show_secrets: bool = False) -> Dict[str, Any]:
        """Flattened view of the configuration, secrets masked by default"""
        summary = asdict(self.get_service_config())
        logging_section = summary.pop("logging", {})
        summary.update({f"logging.{k}": v for k, v in logging_section.items()})

        if not show_secrets:
            for key in summary:
                if any(marker in key.lower() for marker in _SECRET_MARKERS):
                    summary[key] = "***"
        return summary

    def print_config_summary(self, show_secrets: bool = False) -> None:
        """Log the resolved configuration"""
        logger.info(f"Configuration for {self.service_name} ({self.environment.value}):")
        for key, value in sorted(self.get_config_summary(show_secrets).items()):
            logger.info(f"  {key} = {value}")


def create_config(service_name: str) -> ServiceConfig:
    """Shortcut for ConfigManager(service_name).get_service_config()"""
    return ConfigManager(service_name).get_service_config()
