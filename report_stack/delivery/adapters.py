"""
Adapters from the internal DeliveryService contract to the external carriers.

Each adapter translates order ids and regions into the shape its carrier
expects. Carrier calls that fail with a transient error (ConnectionError,
TimeoutError) are retried with exponential backoff via tenacity; any exception
left after that is logged and turned into a failure result. Nothing raised by a
carrier propagates past the adapter.
"""

from __future__ import annotations

import abc
import time
import zlib
from typing import Callable, Optional, TypeVar

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from report_stack.config import get_settings
from report_stack.delivery.abstract import CostResult, DeliveryResult, StatusResult
from report_stack.delivery.carriers import ExternalCarrierA, ExternalCarrierB, ExternalCarrierC
from report_stack.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")

TRANSIENT_ERRORS = (ConnectionError, TimeoutError)


def stable_order_hash(order_id: str) -> int:
    """Process-independent hash of an order id (str hash() is salted per run)."""
    return zlib.crc32(order_id.encode("utf-8"))


class CarrierAdapter(abc.ABC):
    """
    Shared call/retry/degrade machinery for carrier adapters.

    Subclasses implement `_deliver`, `_status` and `_cost` against their
    carrier and may raise freely; the public methods never do.
    """

    name: str
    description: str

    def __init__(
        self,
        retry_attempts: Optional[int] = None,
        retry_backoff_seconds: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        if retry_attempts is None:
            retry_attempts = settings.delivery_retry_attempts
        if retry_attempts < 1:
            raise ValueError(f"retry_attempts must be at least 1, got {retry_attempts}")
        self.retry_attempts = retry_attempts
        self.retry_backoff_seconds = (
            settings.delivery_retry_backoff_seconds
            if retry_backoff_seconds is None
            else retry_backoff_seconds
        )

    def _call(self, operation: str, order_id: str, fn: Callable[[], T]) -> T:
        retrying = Retrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=self.retry_backoff_seconds, max=10),
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            reraise=True,
        )
        log.debug(
            f"[{self.name}] {operation}",
            extra={"service": self.name, "operation": operation, "order_id": order_id},
        )
        return retrying(fn)

    def _log_failure(self, operation: str, order_id: str, exc: Exception) -> None:
        log.warning(
            f"[{self.name}] {operation} failed: {exc}",
            extra={
                "service": self.name,
                "operation": operation,
                "order_id": order_id,
                "error_type": type(exc).__name__,
            },
        )

    def deliver(self, order_id: str) -> DeliveryResult:
        try:
            ok = bool(self._call("deliver", order_id, lambda: self._deliver(order_id)))
        except Exception as exc:  # noqa: BLE001 - carrier failures must not escape the adapter
            self._log_failure("deliver", order_id, exc)
            return DeliveryResult(
                ok=False,
                service=self.name,
                order_id=order_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
        log.info(f"[{self.name}] Delivery result: {ok}", extra={"order_id": order_id, "ok": ok})
        return DeliveryResult(
            ok=ok,
            service=self.name,
            order_id=order_id,
            error=None if ok else "carrier rejected the delivery",
        )

    def status(self, order_id: str) -> StatusResult:
        try:
            text = self._call("status", order_id, lambda: self._status(order_id))
        except Exception as exc:  # noqa: BLE001 - carrier failures must not escape the adapter
            self._log_failure("status", order_id, exc)
            return StatusResult(
                ok=False,
                service=self.name,
                order_id=order_id,
                status=None,
                error=str(exc),
                error_type=type(exc).__name__,
            )
        return StatusResult(ok=True, service=self.name, order_id=order_id, status=text, error=None)

    def cost(self, order_id: str, region: str) -> CostResult:
        try:
            value = self._call("cost", order_id, lambda: self._cost(order_id, region))
        except Exception as exc:  # noqa: BLE001 - carrier failures must not escape the adapter
            self._log_failure("cost", order_id, exc)
            return CostResult(
                ok=False,
                service=self.name,
                order_id=order_id,
                region=region,
                cost=None,
                error=str(exc),
                error_type=type(exc).__name__,
            )
        return CostResult(
            ok=True,
            service=self.name,
            order_id=order_id,
            region=region,
            cost=float(value),
            error=None,
        )

    @abc.abstractmethod
    def _deliver(self, order_id: str) -> bool:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def _status(self, order_id: str) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def _cost(self, order_id: str, region: str) -> float:  # pragma: no cover - interface only
        raise NotImplementedError


class CarrierAAdapter(CarrierAdapter):
    """Maps order ids onto CarrierA's integer item ids."""

    name: str = "carrier_a"
    description: str = "CarrierA via integer item ids."

    def __init__(self, carrier: Optional[ExternalCarrierA] = None, **retry_options) -> None:
        super().__init__(**retry_options)
        self.carrier = carrier or ExternalCarrierA()

    @staticmethod
    def item_id(order_id: str) -> int:
        return stable_order_hash(order_id) % 1000

    def _deliver(self, order_id: str) -> bool:
        return self.carrier.ship_item(self.item_id(order_id))

    def _status(self, order_id: str) -> str:
        return self.carrier.track_shipment(self.item_id(order_id))

    def _cost(self, order_id: str, region: str) -> float:
        return self.carrier.get_rate(self.item_id(order_id))


class CarrierBAdapter(CarrierAdapter):
    """Describes orders as CarrierB package strings and tracking codes."""

    name: str = "carrier_b"
    description: str = "CarrierB via package descriptors."

    def __init__(
        self,
        carrier: Optional[ExternalCarrierB] = None,
        clock_ns: Callable[[], int] = time.time_ns,
        **retry_options,
    ) -> None:
        super().__init__(**retry_options)
        self.carrier = carrier or ExternalCarrierB()
        self._clock_ns = clock_ns

    def package_info(self, order_id: str) -> str:
        return f"order:{order_id};timestamp:{self._clock_ns()}"

    @staticmethod
    def tracking_code(order_id: str) -> str:
        return f"TR-{stable_order_hash(order_id) % 10000}"

    def _deliver(self, order_id: str) -> bool:
        return self.carrier.send_package(self.package_info(order_id))

    def _status(self, order_id: str) -> str:
        return self.carrier.check_package_status(self.tracking_code(order_id))

    def _cost(self, order_id: str, region: str) -> float:
        return self.carrier.price_for_package(region)


class CarrierCAdapter(CarrierAdapter):
    """Passes order refs through; derives a parcel weight for rating."""

    name: str = "carrier_c"
    description: str = "CarrierC via order references and weight rating."

    def __init__(self, carrier: Optional[ExternalCarrierC] = None, **retry_options) -> None:
        super().__init__(**retry_options)
        self.carrier = carrier or ExternalCarrierC()

    @staticmethod
    def weight_kg(order_id: str) -> int:
        return stable_order_hash(order_id) % 10 + 1

    def _deliver(self, order_id: str) -> bool:
        return self.carrier.dispatch(order_id)

    def _status(self, order_id: str) -> str:
        return self.carrier.status(order_id)

    def _cost(self, order_id: str, region: str) -> float:
        return self.carrier.rate(region, self.weight_kg(order_id))


__all__ = [
    "CarrierAAdapter",
    "CarrierAdapter",
    "CarrierBAdapter",
    "CarrierCAdapter",
    "TRANSIENT_ERRORS",
    "stable_order_hash",
]
