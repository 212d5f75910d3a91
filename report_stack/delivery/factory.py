from __future__ import annotations

from typing import Callable, Dict, List

from report_stack.delivery.abstract import DeliveryService
from report_stack.delivery.adapters import CarrierAAdapter, CarrierBAdapter, CarrierCAdapter
from report_stack.delivery.internal import InternalDeliveryService
from report_stack.exceptions import UnknownKindError

_ALIASES = {
    "externala": "carrier_a",
    "externalb": "carrier_b",
    "externalc": "carrier_c",
}


def _service_factories() -> Dict[str, Callable[[], DeliveryService]]:
    """Registry of delivery services."""
    return {
        "internal": lambda: InternalDeliveryService(),
        "carrier_a": lambda: CarrierAAdapter(),
        "carrier_b": lambda: CarrierBAdapter(),
        "carrier_c": lambda: CarrierCAdapter(),
    }


def available_services() -> List[str]:
    """List available delivery service names."""
    return sorted(_service_factories().keys())


def create_delivery_service(kind: str) -> DeliveryService:
    """Build a delivery service by name (case-insensitive; externalA/B/C accepted)."""
    factories = _service_factories()
    name = str(kind).strip().lower()
    name = _ALIASES.get(name, name)
    if name not in factories:
        raise UnknownKindError("delivery service", kind, factories)
    return factories[name]()


__all__ = ["available_services", "create_delivery_service"]
