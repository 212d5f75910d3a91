"""
External carrier stubs.

Three third-party shipping APIs with mutually incompatible shapes. They stand
in for remote services and are only ever called through the adapters.
"""

from __future__ import annotations

from report_stack.utils.logging import get_logger

log = get_logger(__name__)


class ExternalCarrierA:
    """Integer item ids; flat rate by item."""

    def ship_item(self, item_id: int) -> bool:
        log.info(f"[CarrierA] Shipping item {item_id}", extra={"item_id": item_id})
        return True

    def track_shipment(self, shipment_id: int) -> str:
        return f"[CarrierA] Shipment {shipment_id} in transit"

    def get_rate(self, item_id: int) -> float:
        return 700 + (item_id % 5) * 50


class ExternalCarrierB:
    """Free-text package descriptors and tracking codes; price by region."""

    def send_package(self, package_info: str) -> bool:
        log.info(f"[CarrierB] Sending package: {package_info}", extra={"package": package_info})
        return True

    def check_package_status(self, tracking_code: str) -> str:
        return f"[CarrierB] Package {tracking_code} - delivered"

    def price_for_package(self, region: str) -> float:
        return 400 if "near" in region.lower() else 800


class ExternalCarrierC:
    """Order references; rate by weight."""

    def dispatch(self, order_ref: str) -> bool:
        log.info(f"[CarrierC] Dispatching order {order_ref}", extra={"order_ref": order_ref})
        return True

    def status(self, ref_code: str) -> str:
        return f"[CarrierC] Ref:{ref_code} - out for delivery"

    def rate(self, region: str, weight_kg: int) -> float:
        return 300 + weight_kg * 150


__all__ = ["ExternalCarrierA", "ExternalCarrierB", "ExternalCarrierC"]
