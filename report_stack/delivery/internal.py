from __future__ import annotations

from report_stack.delivery.abstract import CostResult, DeliveryResult, StatusResult
from report_stack.utils.logging import get_logger

log = get_logger(__name__)

BASE_COST = 500.0
REMOTE_SURCHARGE = 200.0


class InternalDeliveryService:
    """
    In-house logistics: always delivers; remote regions cost extra.
    """

    name: str = "internal"
    description: str = "Internal logistics fleet."

    def deliver(self, order_id: str) -> DeliveryResult:
        log.info(f"[Internal] Order {order_id} delivered", extra={"order_id": order_id})
        return DeliveryResult(ok=True, service=self.name, order_id=order_id, error=None)

    def status(self, order_id: str) -> StatusResult:
        return StatusResult(
            ok=True,
            service=self.name,
            order_id=order_id,
            status=f"[Internal] Status({order_id}): Delivered",
            error=None,
        )

    def cost(self, order_id: str, region: str) -> CostResult:
        cost = BASE_COST
        if "remote" in region.lower():
            cost += REMOTE_SURCHARGE
        return CostResult(
            ok=True, service=self.name, order_id=order_id, region=region, cost=cost, error=None
        )


__all__ = ["InternalDeliveryService"]
