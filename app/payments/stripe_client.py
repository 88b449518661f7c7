# app/payments/stripe_client.py
import logging
import re

import httpx

from app.core.exceptions import GatewayError, ValidationError
from app.payments.base import PaymentIntent

logger = logging.getLogger(__name__)

INTENT_ID_PATTERN = re.compile(r"^pi_[A-Za-z0-9_]+$")


class StripeGateway:
    """
    Minimal Stripe PaymentIntents client over the REST API.

    Only the two calls the checkout flow needs: create and retrieve.
    Pass `client` to reuse a connection pool (or a mock transport in tests).
    """

    def __init__(
        self,
        secret_key: str,
        api_base: str = "https://api.stripe.com",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        self._client = client or httpx.Client(base_url=api_base, timeout=timeout)
        self._headers = {"Authorization": f"Bearer {secret_key}"}

    def create_intent(
        self,
        amount: int,
        currency: str,
        description: str,
        metadata: dict[str, str],
    ) -> PaymentIntent:
        # Stripe expects form encoding with bracketed keys for nested fields
        data = {
            "amount": str(amount),
            "currency": currency,
            "description": description,
            "automatic_payment_methods[enabled]": "true",
        }
        for key, value in metadata.items():
            data[f"metadata[{key}]"] = value

        payload = self._request("POST", "/v1/payment_intents", data=data)
        return self._to_intent(payload)

    def retrieve_intent(self, intent_id: str) -> PaymentIntent:
        # The id comes from the client and ends up in the URL path
        if not INTENT_ID_PATTERN.fullmatch(intent_id):
            raise ValidationError("Invalid payment intent id.")

        payload = self._request("GET", f"/v1/payment_intents/{intent_id}")
        return self._to_intent(payload)

    def _request(self, method: str, path: str, data: dict | None = None) -> dict:
        try:
            response = self._client.request(
                method, path, data=data, headers=self._headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = _error_message(exc.response)
            logger.error(
                "Stripe %s %s failed status=%s message=%s",
                method,
                path,
                exc.response.status_code,
                message,
            )
            raise GatewayError(f"Payment provider error: {message}") from exc
        except httpx.HTTPError as exc:
            logger.error("Stripe %s %s unreachable: %s", method, path, exc)
            raise GatewayError("Payment provider unavailable") from exc

        return response.json()

    @staticmethod
    def _to_intent(payload: dict) -> PaymentIntent:
        return PaymentIntent(
            id=payload["id"],
            status=payload["status"],
            client_secret=payload.get("client_secret"),
            amount=payload.get("amount"),
            currency=payload.get("currency"),
            metadata=payload.get("metadata") or {},
        )


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.reason_phrase or "unknown error"
