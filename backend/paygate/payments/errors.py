"""Error kinds raised by payment providers."""

from __future__ import annotations

from enum import Enum


class PaymentErrorKind(str, Enum):
    INVALID_AMOUNT = "invalid_amount"
    PAYMENT_FAILED = "payment_failed"
    UNSUPPORTED = "unsupported"


class PaymentError(Exception):
    """Base class for failures reported by a payment operation."""

    kind: PaymentErrorKind
    default_message = "payment error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidAmountError(PaymentError):
    kind = PaymentErrorKind.INVALID_AMOUNT
    default_message = "invalid payment amount"


class PaymentFailedError(PaymentError):
    # Reserved for network-backed gateways; the stubs never raise it.
    kind = PaymentErrorKind.PAYMENT_FAILED
    default_message = "payment failed"


class UnsupportedOperationError(PaymentError):
    kind = PaymentErrorKind.UNSUPPORTED
    default_message = "operation not supported by this provider"


class ProviderConfigurationError(RuntimeError):
    """Raised when a provider cannot be built from the current settings."""


__all__ = [
    "InvalidAmountError",
    "PaymentError",
    "PaymentErrorKind",
    "PaymentFailedError",
    "ProviderConfigurationError",
    "UnsupportedOperationError",
]
