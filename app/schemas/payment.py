# app/schemas/payment.py
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import Field

from app.schemas.base import CamelModel, RequiredStr


class PaymentIntentCreate(CamelModel):
    """
    Appointment fee (or ad-hoc donation) intent.

    amount is in minor units; donation_amount, when given, is in
    currency units and takes precedence.
    """

    amount: int = Field(default=7500, ge=50)
    appointment_id: UUID | None = None
    donation_amount: Decimal | None = Field(default=None, gt=0)
    purpose: Literal["appointment", "donation"] = "appointment"


class DonationIntentCreate(CamelModel):
    amount: Decimal = Field(ge=1)
    program: str | None = None


class PaymentIntentResponse(CamelModel):
    client_secret: str
    payment_intent_id: str


class AppointmentPaymentConfirm(CamelModel):
    payment_intent_id: RequiredStr
    appointment_id: UUID | None = None


class PaymentConfirmResult(CamelModel):
    success: bool = True
    message: str
