# app/api/v1/endpoints/payments.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.payments.base import PaymentGateway, get_payment_gateway
from app.schemas.payment import (
    AppointmentPaymentConfirm,
    DonationIntentCreate,
    PaymentConfirmResult,
    PaymentIntentCreate,
    PaymentIntentResponse,
)
from app.services.payment_service import (
    confirm_appointment_payment,
    create_appointment_intent,
    create_donation_intent,
)

router = APIRouter()


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent_endpoint(
    payload: PaymentIntentCreate,
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> PaymentIntentResponse:
    intent = create_appointment_intent(db, gateway, payload=payload)
    return PaymentIntentResponse(
        client_secret=intent.client_secret,
        payment_intent_id=intent.id,
    )


@router.post("/confirm-payment", response_model=PaymentConfirmResult)
def confirm_payment_endpoint(
    payload: AppointmentPaymentConfirm,
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> PaymentConfirmResult:
    confirm_appointment_payment(db, gateway, payload=payload)
    return PaymentConfirmResult(success=True, message="Payment confirmed successfully")


@router.post("/create-donation-intent", response_model=PaymentIntentResponse)
def create_donation_intent_endpoint(
    payload: DonationIntentCreate,
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> PaymentIntentResponse:
    intent = create_donation_intent(gateway, payload=payload)
    return PaymentIntentResponse(
        client_secret=intent.client_secret,
        payment_intent_id=intent.id,
    )
