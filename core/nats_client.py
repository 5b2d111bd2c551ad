"""
NATS Client for Python Microservices
Provides event-driven communication between the commerce services

Events are plain JSON envelopes published on a subject equal to the event
type (e.g. ``inventory.stock_reserved``). The bus is optional: services are
constructed with ``event_bus=None`` when NATS is disabled and their
publishers simply skip.
"""

import asyncio
import json
import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING, Union

import nats
from nats.aio.client import Client as NATS
from nats.aio.msg import Msg

if TYPE_CHECKING:
    from core.config_manager import ConfigManager


class DecimalEncoder(json.JSONEncoder):
    """Custom JSON encoder that handles Decimal and datetime types"""
    def default(self, obj):
        if isinstance(obj, Decimal):
            return float(obj)
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


logger = logging.getLogger(__name__)


class EventType(Enum):
    """Event types published by the commerce services"""

    # Inventory Events
    SKU_CREATED = "inventory.sku_created"
    SKU_DELETED = "inventory.sku_deleted"
    STOCK_RECEIVED = "inventory.stock_received"
    STOCK_REMOVED = "inventory.stock_removed"
    STOCK_RESERVED = "inventory.stock_reserved"
    RESERVATION_RELEASED = "inventory.reservation_released"
    STOCK_DEPLETED = "inventory.stock_depleted"

    # Product Events
    PRODUCT_CREATED = "product.created"
    PRODUCT_UPDATED = "product.updated"
    PRODUCT_DELETED = "product.deleted"
    PRODUCT_STOCK_CHANGED = "product.stock_changed"
    PRODUCT_OUT_OF_STOCK = "product.out_of_stock"


class ServiceSource(Enum):
    """Service sources"""

    INVENTORY_SERVICE = "inventory_service"
    PRODUCT_SERVICE = "product_service"


class Event:
    """Event model"""

    def __init__(
        self,
        event_type: Union[EventType, str],
        source: Union[ServiceSource, str],
        data: Dict[str, Any],
        subject: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ):
        self.id = str(uuid.uuid4())
        self.type = event_type.value if isinstance(event_type, Enum) else event_type
        self.source = source.value if isinstance(source, Enum) else source
        self.data = data
        self.subject = subject
        self.timestamp = datetime.now(timezone.utc).isoformat()
        self.metadata = metadata or {}
        self.version = "1.0.0"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "source": self.source,
            "subject": self.subject,
            "timestamp": self.timestamp,
            "data": self.data,
            "metadata": self.metadata,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        event = cls.__new__(cls)
        event.id = data.get("id")
        event.type = data.get("type")
        event.source = data.get("source")
        event.subject = data.get("subject")
        event.timestamp = data.get("timestamp")
        event.data = data.get("data", {})
        event.metadata = data.get("metadata", {})
        event.version = data.get("version", "1.0.0")
        return event


class NATSEventBus:
    """
    NATS event bus built on nats-py.

    Subjects are the event types, so a consumer interested in every
    inventory change subscribes to ``inventory.>``.
    """

    def __init__(
        self,
        service_name: str,
        config: Optional["ConfigManager"] = None,
        servers: Optional[List[str]] = None,
    ):
        """
        Initialize NATS Event Bus.

        Args:
            service_name: Name of the service (used as the connection name)
            config: Optional ConfigManager to read NATS_URL from
            servers: Explicit server URLs, overriding configuration
        """
        from core.config_manager import ConfigManager

        self.service_name = service_name

        if servers is None:
            if config is None:
                config = ConfigManager(service_name)
            servers = [config.get_service_config().nats_url]

        self.servers = servers
        self._client: Optional[NATS] = None
        self._subscriptions: Dict[str, Any] = {}
        self._is_connected = False

        logger.info(f"NATS EventBus initialized: {', '.join(self.servers)}")

    @property
    def is_connected(self) -> bool:
        return self._is_connected and self._client is not None and self._client.is_connected

    async def connect(self):
        """Connect to the NATS server"""
        try:
            self._client = await nats.connect(
                servers=self.servers,
                name=self.service_name,
                connect_timeout=5,
                max_reconnect_attempts=3,
            )
            self._is_connected = True
            logger.info(f"Connected to NATS as {self.service_name}")
        except Exception as e:
            logger.error(f"Failed to connect to NATS: {e}")
            raise

    async def publish_event(self, event: Event) -> bool:
        """Publish an event on the subject matching its type"""
        if not self.is_connected:
            logger.error("Not connected to NATS")
            return False

        try:
            subject = event.subject or event.type
            data = json.dumps(event.to_dict(), cls=DecimalEncoder).encode()
            await self._client.publish(subject, data)
            logger.info(f"Published event {event.type} [{event.id}]")
            return True

        except Exception as e:
            logger.error(f"Error publishing event {event.id}: {e}")
            return False

    async def subscribe_to_events(self, pattern: str, handler: Callable) -> str:
        """
        Subscribe to events with a subject pattern.

        Args:
            pattern: NATS subject pattern (e.g. "inventory.>" or "product.*")
            handler: Async callback receiving an Event
        """
        if not self.is_connected:
            raise RuntimeError("Not connected to NATS")

        async def _on_message(msg: Msg):
            try:
                event = Event.from_dict(json.loads(msg.data.decode()))
                result = handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Error handling message on {msg.subject}: {e}", exc_info=True)

        subscription = await self._client.subscribe(pattern, cb=_on_message)
        self._subscriptions[pattern] = subscription
        logger.info(f"Subscribed to {pattern}")
        return pattern

    async def close(self):
        """Drain subscriptions and close the connection"""
        if self._client and not self._client.is_closed:
            try:
                await self._client.drain()
            except Exception as e:
                logger.warning(f"Error draining NATS connection: {e}")
                await self._client.close()
        self._subscriptions.clear()
        self._is_connected = False
        logger.info(f"NATS connection closed for {self.service_name}")


# Global event bus instances, one per service
_event_buses: Dict[str, NATSEventBus] = {}


async def get_event_bus(
    service_name: str,
    config: Optional["ConfigManager"] = None,
) -> Optional[NATSEventBus]:
    """
    Get or create the event bus for a service.

    Returns None when NATS_ENABLED is false so callers can run without
    event publishing.
    """
    from core.config_manager import ConfigManager

    if config is None:
        config = ConfigManager(service_name)

    if not config.get_service_config().nats_enabled:
        logger.info(f"NATS disabled for {service_name}, event publishing off")
        return None

    existing = _event_buses.get(service_name)
    if existing is None or not existing.is_connected:
        event_bus = NATSEventBus(service_name=service_name, config=config)
        await event_bus.connect()
        _event_buses[service_name] = event_bus

    return _event_buses[service_name]
