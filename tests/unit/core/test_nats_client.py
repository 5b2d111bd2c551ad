"""
Unit Tests: event envelope and event bus helpers (no NATS server needed)
"""
import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from core.config_manager import ConfigManager
from core.nats_client import (
    DecimalEncoder,
    Event,
    EventType,
    NATSEventBus,
    ServiceSource,
    get_event_bus,
)

pytestmark = pytest.mark.unit


class TestEvent:
    """Event envelope"""

    def test_enum_values_are_unwrapped(self):
        event = Event(
            event_type=EventType.STOCK_RESERVED,
            source=ServiceSource.INVENTORY_SERVICE,
            data={"sku_id": "abc"},
        )

        assert event.type == "inventory.stock_reserved"
        assert event.source == "inventory_service"
        assert event.id
        assert event.version == "1.0.0"

    def test_plain_strings_accepted(self):
        event = Event(event_type="product.created", source="product_service", data={})

        assert event.type == EventType.PRODUCT_CREATED.value

    def test_dict_round_trip_keeps_identity(self):
        original = Event(
            event_type=EventType.SKU_CREATED,
            source=ServiceSource.INVENTORY_SERVICE,
            data={"quantity": 5},
            metadata={"trace": "t-1"},
        )

        restored = Event.from_dict(original.to_dict())

        assert restored.id == original.id
        assert restored.type == original.type
        assert restored.data == {"quantity": 5}
        assert restored.metadata == {"trace": "t-1"}


class TestDecimalEncoder:

    def test_encodes_decimal_and_datetime(self):
        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        encoded = json.loads(json.dumps({"price": Decimal("9.99"), "at": moment}, cls=DecimalEncoder))

        assert encoded == {"price": 9.99, "at": moment.isoformat()}


class TestNATSEventBus:
    """Behaviour that does not need a server"""

    def test_servers_from_config(self, monkeypatch):
        monkeypatch.setenv("NATS_URL", "nats://nats.internal:4222")

        bus = NATSEventBus("inventory_service", config=ConfigManager("inventory_service"))

        assert bus.servers == ["nats://nats.internal:4222"]
        assert bus.is_connected is False

    @pytest.mark.asyncio
    async def test_publish_without_connection_returns_false(self):
        bus = NATSEventBus("inventory_service", servers=["nats://localhost:4222"])
        event = Event(EventType.SKU_DELETED, ServiceSource.INVENTORY_SERVICE, {})

        assert await bus.publish_event(event) is False

    @pytest.mark.asyncio
    async def test_subscribe_without_connection_raises(self):
        bus = NATSEventBus("product_service", servers=["nats://localhost:4222"])

        with pytest.raises(RuntimeError):
            await bus.subscribe_to_events("product.>", lambda event: None)

    @pytest.mark.asyncio
    async def test_get_event_bus_disabled_returns_none(self, monkeypatch):
        monkeypatch.setenv("NATS_ENABLED", "false")

        assert await get_event_bus("inventory_service") is None


class TestServiceEventTypes:
    """Service event enums publish on the subjects the core bus knows"""

    def test_inventory_subjects_known(self):
        from microservices.inventory_service.events import InventoryEventType

        core_values = {t.value for t in EventType}
        assert {t.value for t in InventoryEventType} <= core_values

    def test_product_subjects_known(self):
        from microservices.product_service.events import ProductEventType

        core_values = {t.value for t in EventType}
        assert {t.value for t in ProductEventType} <= core_values
        assert all(t.value.startswith("product.") for t in ProductEventType)
