"""
Delivery service contract and result types.

Every service, native or adapted, returns explicit result dictionaries instead
of raising: `ok` tells success, and on failure `error`/`error_type` carry the
underlying cause.
"""

from __future__ import annotations

from typing import Optional, Protocol, TypedDict, runtime_checkable


class DeliveryResult(TypedDict, total=False):
    """Outcome of a delivery request."""

    ok: bool
    service: str
    order_id: str
    error: Optional[str]
    error_type: Optional[str]


class StatusResult(TypedDict, total=False):
    """Outcome of a status lookup; `status` is None on failure."""

    ok: bool
    service: str
    order_id: str
    status: Optional[str]
    error: Optional[str]
    error_type: Optional[str]


class CostResult(TypedDict, total=False):
    """Outcome of a cost quote; `cost` is None on failure."""

    ok: bool
    service: str
    order_id: str
    region: str
    cost: Optional[float]
    error: Optional[str]
    error_type: Optional[str]


@runtime_checkable
class DeliveryService(Protocol):
    """
    Internal delivery contract.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the service.
    """

    name: str
    description: str

    def deliver(self, order_id: str) -> DeliveryResult:
        ...

    def status(self, order_id: str) -> StatusResult:
        ...

    def cost(self, order_id: str, region: str) -> CostResult:
        ...


__all__ = ["CostResult", "DeliveryResult", "DeliveryService", "StatusResult"]
