from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


class PaymentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    amount_minor: int
    currency: str
    status: str


class Subscription(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    customer_id: str
    plan_id: str
    status: str


@runtime_checkable
class PaymentProvider(Protocol):
    name: ClassVar[str]

    def charge(self, *, amount_minor: int, currency: str, source: str) -> PaymentResult: ...

    def refund(self, *, charge_id: str, amount_minor: int) -> None: ...

    def create_subscription(self, *, customer_id: str, plan_id: str) -> Subscription: ...
