# app/services/payment_service.py
"""
Appointment fee and donation payments.

Pharmacy orders have their own payment handling in order_service.
"""
import logging

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.exceptions import PaymentNotSuccessfulError, ValidationError
from app.payments.base import PaymentGateway, PaymentIntent
from app.schemas.payment import (
    AppointmentPaymentConfirm,
    DonationIntentCreate,
    PaymentIntentCreate,
)
from app.services.appointment_service import attach_payment_intent, get_appointment
from app.utils.money import to_minor_units

logger = logging.getLogger(__name__)

APPOINTMENT_DESCRIPTION = "HealthCare Plus Appointment Fee"
DONATION_DESCRIPTION = "Donation to HealthCare Plus - Supporting inclusive healthcare"


def create_appointment_intent(
    db: Session,
    gateway: PaymentGateway,
    *,
    payload: PaymentIntentCreate,
) -> PaymentIntent:
    settings = get_settings()

    if payload.appointment_id:
        # Fail before charging anything if the appointment is unknown
        get_appointment(db, payload.appointment_id)

    if payload.donation_amount is not None:
        amount = to_minor_units(payload.donation_amount)
    else:
        amount = payload.amount

    description = (
        DONATION_DESCRIPTION
        if payload.purpose == "donation"
        else APPOINTMENT_DESCRIPTION
    )

    intent = gateway.create_intent(
        amount=amount,
        currency=settings.payment_currency,
        description=description,
        metadata={
            "appointment_id": str(payload.appointment_id or ""),
            "purpose": payload.purpose,
        },
    )

    if payload.appointment_id:
        attach_payment_intent(
            db,
            appointment_id=payload.appointment_id,
            payment_intent_id=intent.id,
        )

    return intent


def confirm_appointment_payment(
    db: Session,
    gateway: PaymentGateway,
    *,
    payload: AppointmentPaymentConfirm,
) -> None:
    """
    Re-check the intent with the provider and, on success, mark the
    appointment (if any) as confirmed.

    The intent must be the one issued for that appointment by
    create_appointment_intent; any other succeeded intent (a donation,
    another patient's fee) is rejected before the provider is asked.
    """
    if payload.appointment_id:
        appointment = get_appointment(db, payload.appointment_id)
        if appointment.payment_intent_id != payload.payment_intent_id:
            logger.warning(
                "Intent %s does not belong to appointment %s",
                payload.payment_intent_id,
                payload.appointment_id,
            )
            raise ValidationError("Payment intent does not match this appointment.")

    intent = gateway.retrieve_intent(payload.payment_intent_id)
    if not intent.succeeded:
        logger.warning(
            "Appointment payment not successful intent=%s status=%s",
            payload.payment_intent_id,
            intent.status,
        )
        raise PaymentNotSuccessfulError()

    if payload.appointment_id:
        attach_payment_intent(
            db,
            appointment_id=payload.appointment_id,
            payment_intent_id=payload.payment_intent_id,
            confirmed=True,
        )


def create_donation_intent(
    gateway: PaymentGateway,
    *,
    payload: DonationIntentCreate,
) -> PaymentIntent:
    settings = get_settings()
    program = payload.program or "general"

    return gateway.create_intent(
        amount=to_minor_units(payload.amount),
        currency=settings.payment_currency,
        description=f"Donation to HealthCare Plus - {program}",
        metadata={"purpose": "donation", "program": program},
    )
