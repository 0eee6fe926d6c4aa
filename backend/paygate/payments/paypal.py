from __future__ import annotations

from uuid import uuid4

from .base import PaymentProvider, PaymentResult, Subscription
from .errors import UnsupportedOperationError


class PayPalProvider(PaymentProvider):
    """PayPal gateway stub. Accepts any amount; subscriptions are not available."""

    name = "paypal"

    def __init__(self, *, client_id: str, client_secret: str) -> None:
        self._client_id = client_id
        self._client_secret = client_secret

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def charge(self, *, amount_minor: int, currency: str, source: str) -> PaymentResult:
        return PaymentResult(
            id=f"PAYID-{uuid4().hex[:24].upper()}",
            amount_minor=amount_minor,
            currency=currency,
            status="COMPLETED",
        )

    def refund(self, *, charge_id: str, amount_minor: int) -> None:
        return None

    def create_subscription(self, *, customer_id: str, plan_id: str) -> Subscription:
        raise UnsupportedOperationError(
            "PayPalProvider does not support subscriptions in this build."
        )
