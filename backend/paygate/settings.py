from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).resolve().parents[2]
ENV_FILE = REPO_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE), env_file_encoding="utf-8", extra="ignore"
    )

    # console logs instead of JSON
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Which gateway get_payment_provider() builds
    PAYMENT_PROVIDER: Literal["stripe", "paypal"] = "stripe"

    # Stripe
    STRIPE_API_KEY: SecretStr | None = None

    # PayPal (client credentials)
    PAYPAL_CLIENT_ID: str | None = None
    PAYPAL_CLIENT_SECRET: SecretStr | None = None

    @property
    def stripe_api_key(self) -> str | None:
        return _reveal(self.STRIPE_API_KEY)

    @property
    def paypal_client_id(self) -> str | None:
        value = (self.PAYPAL_CLIENT_ID or "").strip()
        return value or None

    @property
    def paypal_client_secret(self) -> str | None:
        return _reveal(self.PAYPAL_CLIENT_SECRET)


def _reveal(secret: SecretStr | None) -> str | None:
    # Blank values in .env count as unset
    if secret is None:
        return None
    value = secret.get_secret_value().strip()
    return value or None


settings = Settings()
