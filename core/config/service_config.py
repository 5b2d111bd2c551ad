#!/usr/bin/env python3
"""Per-microservice runtime configuration

Host/port binding, debug flag and event bus settings for a single
microservice. Each service has a default port; environment variables
override it.
"""
import os
from dataclasses import dataclass, field
from typing import Dict

from .logging_config import LoggingConfig

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


# Port registry for the commerce services
SERVICE_PORTS: Dict[str, int] = {
    "product_service": 8215,
    "inventory_service": 8252,
}


@dataclass
class ServiceConfig:
    """Runtime settings for one microservice"""

    service_name: str = "commerce"
    environment: str = "development"
    debug: bool = False

    # ===========================================
    # HTTP binding
    # ===========================================
    service_host: str = "0.0.0.0"
    service_port: int = 8000

    # ===========================================
    # NATS event bus (optional)
    # ===========================================
    nats_enabled: bool = False
    nats_url: str = "nats://localhost:4222"

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def log_level(self) -> str:
        return self.logging.log_level

    @classmethod
    def from_env(cls, service_name: str) -> 'ServiceConfig':
        """Load service configuration from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        default_port = SERVICE_PORTS.get(service_name, 8000)
        # INVENTORY_SERVICE_PORT wins over the generic SERVICE_PORT
        port_key = f"{service_name.upper()}_PORT"
        port = os.getenv(port_key) or os.getenv("SERVICE_PORT", "")

        return cls(
            service_name=service_name,
            environment=env,
            debug=_bool(os.getenv("DEBUG", "false")),
            service_host=os.getenv("SERVICE_HOST", "0.0.0.0"),
            service_port=_int(port, default_port),
            nats_enabled=_bool(os.getenv("NATS_ENABLED", "false")),
            nats_url=os.getenv("NATS_URL", "nats://localhost:4222"),
            logging=LoggingConfig.from_env(service_name),
        )
