"""Payment provider abstraction for charges, refunds and subscriptions."""

from .base import PaymentProvider, PaymentResult, Subscription
from .errors import (
    InvalidAmountError,
    PaymentError,
    PaymentErrorKind,
    PaymentFailedError,
    ProviderConfigurationError,
    UnsupportedOperationError,
)
from .factory import create_payment_provider, get_payment_provider
from .paypal import PayPalProvider
from .stripe import StripeProvider

__all__ = [
    "create_payment_provider",
    "get_payment_provider",
    "InvalidAmountError",
    "PaymentError",
    "PaymentErrorKind",
    "PaymentFailedError",
    "PaymentProvider",
    "PaymentResult",
    "PayPalProvider",
    "ProviderConfigurationError",
    "StripeProvider",
    "Subscription",
    "UnsupportedOperationError",
]
