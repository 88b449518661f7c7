# app/payments/sandbox_client.py
import logging
import secrets

from app.core.exceptions import GatewayError
from app.payments.base import SUCCEEDED, PaymentIntent

logger = logging.getLogger(__name__)


class SandboxGateway:
    """
    In-process stand-in for the payment provider (local demos and tests).

    Intents start in "requires_payment_method". With auto_succeed the
    first retrieve reports "succeeded", as if the customer paid;
    otherwise call set_status() to simulate the outcome.
    """

    def __init__(self, auto_succeed: bool = False):
        self.auto_succeed = auto_succeed
        self.intents: dict[str, PaymentIntent] = {}
        self.fail_requests = False

    def create_intent(
        self,
        amount: int,
        currency: str,
        description: str,
        metadata: dict[str, str],
    ) -> PaymentIntent:
        self._check_available()

        intent_id = f"pi_sandbox_{secrets.token_hex(12)}"
        intent = PaymentIntent(
            id=intent_id,
            status="requires_payment_method",
            client_secret=f"{intent_id}_secret_{secrets.token_hex(12)}",
            amount=amount,
            currency=currency,
            metadata=dict(metadata),
        )
        self.intents[intent_id] = intent
        logger.info(
            "[PAYMENT SANDBOX] Created intent %s amount=%s %s (%s)",
            intent_id,
            amount,
            currency,
            description,
        )
        return intent

    def retrieve_intent(self, intent_id: str) -> PaymentIntent:
        self._check_available()

        intent = self.intents.get(intent_id)
        if intent is None:
            raise GatewayError(f"No such payment_intent: '{intent_id}'")

        if self.auto_succeed and intent.status == "requires_payment_method":
            intent.status = SUCCEEDED
        return intent

    def set_status(self, intent_id: str, status: str) -> None:
        self.intents[intent_id].status = status

    def _check_available(self) -> None:
        if self.fail_requests:
            raise GatewayError("Payment provider unavailable")
