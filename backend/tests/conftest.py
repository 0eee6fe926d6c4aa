import sys
from pathlib import Path

import pytest
import structlog
from pydantic import SecretStr

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.paygate.payments import PayPalProvider, StripeProvider  # noqa: E402
from backend.paygate.payments.factory import get_payment_provider  # noqa: E402
from backend.paygate.settings import Settings, settings  # noqa: E402


@pytest.fixture
def stripe_provider() -> StripeProvider:
    return StripeProvider(api_key="sk_test_123")


@pytest.fixture
def paypal_provider() -> PayPalProvider:
    return PayPalProvider(client_id="client_id", client_secret="client_secret")


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture(autouse=True)
def configured_settings(monkeypatch):
    monkeypatch.setattr(settings, "PAYMENT_PROVIDER", "stripe")
    monkeypatch.setattr(settings, "STRIPE_API_KEY", SecretStr("sk_test_123"))
    monkeypatch.setattr(settings, "PAYPAL_CLIENT_ID", "client_id_123")
    monkeypatch.setattr(settings, "PAYPAL_CLIENT_SECRET", SecretStr("client_secret_123"))
    get_payment_provider.cache_clear()
    yield
    get_payment_provider.cache_clear()
    structlog.reset_defaults()
