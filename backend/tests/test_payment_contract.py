"""Both gateways satisfy the same PaymentProvider contract."""

import pytest
from backend.paygate.payments import (
    InvalidAmountError,
    PaymentError,
    PaymentErrorKind,
    PaymentFailedError,
    PaymentProvider,
    PayPalProvider,
    StripeProvider,
    UnsupportedOperationError,
)

PROVIDERS = [
    pytest.param(lambda: StripeProvider(api_key="sk_test_123"), "succeeded", id="stripe"),
    pytest.param(
        lambda: PayPalProvider(client_id="client_id", client_secret="client_secret"),
        "COMPLETED",
        id="paypal",
    ),
]


@pytest.mark.parametrize("factory, charge_status", PROVIDERS)
def test_provider_implements_contract(factory, charge_status):
    provider: PaymentProvider = factory()

    assert isinstance(provider, PaymentProvider)

    result = provider.charge(amount_minor=100, currency="usd", source="source")
    assert result.amount_minor == 100
    assert result.status == charge_status
    assert result.id

    assert provider.refund(charge_id="charge_id", amount_minor=100) is None


def test_subscription_support_differs_between_providers():
    stripe = StripeProvider(api_key="sk_test_123")
    paypal = PayPalProvider(client_id="client_id", client_secret="client_secret")

    assert stripe.create_subscription(customer_id="customer", plan_id="plan").status == "active"
    with pytest.raises(UnsupportedOperationError):
        paypal.create_subscription(customer_id="customer", plan_id="plan")


@pytest.mark.parametrize(
    "error_cls, kind",
    [
        (InvalidAmountError, PaymentErrorKind.INVALID_AMOUNT),
        (PaymentFailedError, PaymentErrorKind.PAYMENT_FAILED),
        (UnsupportedOperationError, PaymentErrorKind.UNSUPPORTED),
    ],
)
def test_error_kinds(error_cls, kind):
    err = error_cls()

    assert isinstance(err, PaymentError)
    assert err.kind is kind
    assert str(err)


def test_error_message_can_be_overridden():
    err = PaymentFailedError("card declined")
    assert str(err) == "card declined"
    assert err.kind == "payment_failed"
