from __future__ import annotations

from functools import lru_cache

from ..logging_config import get_logger
from ..settings import Settings, settings
from .base import PaymentProvider
from .errors import ProviderConfigurationError
from .paypal import PayPalProvider
from .stripe import StripeProvider

logger = get_logger(__name__)

PROVIDER_NAMES = (StripeProvider.name, PayPalProvider.name)


def create_payment_provider(
    provider_name: str | None = None, *, config: Settings | None = None
) -> PaymentProvider:
    """Build a provider from settings; ``provider_name`` overrides PAYMENT_PROVIDER."""
    config = config or settings
    name = (provider_name or config.PAYMENT_PROVIDER or "").strip().lower()

    if name == StripeProvider.name:
        api_key = config.stripe_api_key
        if not api_key:
            raise ProviderConfigurationError(
                "STRIPE_API_KEY is not set. Configure it to use the stripe provider."
            )
        provider: PaymentProvider = StripeProvider(api_key=api_key)
    elif name == PayPalProvider.name:
        client_id = config.paypal_client_id
        client_secret = config.paypal_client_secret
        if not client_id or not client_secret:
            raise ProviderConfigurationError(
                "PAYPAL_CLIENT_ID and PAYPAL_CLIENT_SECRET must both be set to use the paypal provider."
            )
        provider = PayPalProvider(client_id=client_id, client_secret=client_secret)
    else:
        raise ProviderConfigurationError(
            f"Unsupported payment provider '{provider_name or config.PAYMENT_PROVIDER}'. "
            f"Choose one of: {', '.join(PROVIDER_NAMES)}."
        )

    logger.info("payment_provider_selected", provider=provider.name)
    return provider


@lru_cache(maxsize=1)
def get_payment_provider() -> PaymentProvider:
    return create_payment_provider()
