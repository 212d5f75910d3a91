"""
Delivery collaborator for report_stack.

An internal delivery contract, a native implementation, and adapters that
translate it onto three incompatible external carrier APIs.
"""

from report_stack.delivery.abstract import (
    CostResult,
    DeliveryResult,
    DeliveryService,
    StatusResult,
)
from report_stack.delivery.adapters import (
    CarrierAAdapter,
    CarrierAdapter,
    CarrierBAdapter,
    CarrierCAdapter,
)
from report_stack.delivery.carriers import ExternalCarrierA, ExternalCarrierB, ExternalCarrierC
from report_stack.delivery.factory import available_services, create_delivery_service
from report_stack.delivery.internal import InternalDeliveryService

__all__ = [
    # Contract
    "CostResult",
    "DeliveryResult",
    "DeliveryService",
    "StatusResult",
    # Implementations
    "CarrierAAdapter",
    "CarrierAdapter",
    "CarrierBAdapter",
    "CarrierCAdapter",
    "InternalDeliveryService",
    # External stubs
    "ExternalCarrierA",
    "ExternalCarrierB",
    "ExternalCarrierC",
    # Factory
    "available_services",
    "create_delivery_service",
]
