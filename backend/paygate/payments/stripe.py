from __future__ import annotations

from uuid import uuid4

from .base import PaymentProvider, PaymentResult, Subscription
from .errors import InvalidAmountError


class StripeProvider(PaymentProvider):
    """Stripe gateway stub: validates the amount, never calls the network."""

    name = "stripe"

    def __init__(self, *, api_key: str) -> None:
        self._api_key = api_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def charge(self, *, amount_minor: int, currency: str, source: str) -> PaymentResult:
        if amount_minor <= 0:
            raise InvalidAmountError()
        return PaymentResult(
            id=f"ch_{uuid4().hex}",
            amount_minor=amount_minor,
            currency=currency,
            status="succeeded",
        )

    def refund(self, *, charge_id: str, amount_minor: int) -> None:
        return None

    def create_subscription(self, *, customer_id: str, plan_id: str) -> Subscription:
        return Subscription(
            id=f"sub_{uuid4().hex}",
            customer_id=customer_id,
            plan_id=plan_id,
            status="active",
        )
