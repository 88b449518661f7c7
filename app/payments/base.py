# app/payments/base.py
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Protocol

from app.core.config import get_settings

SUCCEEDED = "succeeded"


@dataclass
class PaymentIntent:
    id: str
    status: str
    client_secret: str | None = None
    amount: int | None = None
    currency: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCEEDED


class PaymentGateway(Protocol):
    def create_intent(
        self,
        amount: int,
        currency: str,
        description: str,
        metadata: dict[str, str],
    ) -> PaymentIntent:
        """
        Create a payment intent for amount minor units.
        Raises GatewayError if the provider cannot be reached or refuses.
        """
        ...

    def retrieve_intent(self, intent_id: str) -> PaymentIntent:
        """
        Fetch the current state of an intent from the provider.
        Raises GatewayError if the provider cannot be reached or refuses.
        """
        ...


@lru_cache()
def get_payment_gateway() -> PaymentGateway:
    """
    FastAPI dependency returning the configured gateway.

    - payment_backend == "stripe": live HTTP client (needs STRIPE_SECRET_KEY).
    - otherwise: in-process sandbox, for local demos.
    """
    settings = get_settings()

    if settings.payment_backend.lower() == "stripe":
        from app.payments.stripe_client import StripeGateway

        if not settings.stripe_secret_key:
            raise ValueError("STRIPE_SECRET_KEY is not configured")

        return StripeGateway(
            secret_key=settings.stripe_secret_key,
            api_base=settings.stripe_api_base,
            timeout=settings.gateway_timeout_seconds,
        )

    from app.payments.sandbox_client import SandboxGateway

    return SandboxGateway(auto_succeed=settings.payment_sandbox_auto_succeed)
