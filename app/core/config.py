from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "local"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./healthcare_plus.db"
    seed_on_startup: bool = True

    # Payments
    payment_backend: str = "sandbox"  # "sandbox" or "stripe"
    payment_sandbox_auto_succeed: bool = True
    stripe_secret_key: str | None = None
    stripe_api_base: str = "https://api.stripe.com"
    payment_currency: str = "usd"
    gateway_timeout_seconds: float = 10.0

    # Clinic / pharmacy
    appointment_fee: Decimal = Decimal("75.00")
    estimated_delivery_days: int = 3

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance so the .env is parsed once.
    """
    return Settings()
