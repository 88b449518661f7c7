# app/services/appointment_service.py
import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, PersistenceError
from app.models.appointment import Appointment, AppointmentStatus
from app.schemas.appointment import AppointmentCreate

logger = logging.getLogger(__name__)


def create_appointment(
    db: Session,
    *,
    payload: AppointmentCreate,
    fee: Decimal,
) -> Appointment:
    appointment = Appointment(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=str(payload.email),
        phone=payload.phone,
        service=payload.service,
        appointment_date=payload.appointment_date,
        appointment_time=payload.appointment_time,
        language_preference=payload.language_preference,
        accommodation_needs=payload.accommodation_needs,
        additional_notes=payload.additional_notes,
        status=AppointmentStatus.SCHEDULED,
        amount=fee,
    )
    try:
        db.add(appointment)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create appointment for %s", payload.email)
        raise PersistenceError("Failed to create appointment.")

    db.refresh(appointment)
    return appointment


def get_appointment(db: Session, appointment_id: UUID) -> Appointment:
    appointment = db.get(Appointment, appointment_id)
    if not appointment:
        raise NotFoundError("Appointment not found")
    return appointment


def list_appointments_for_email(db: Session, email: str) -> list[Appointment]:
    """
    Appointments booked with this email, newest first.
    """
    return (
        db.query(Appointment)
        .filter(Appointment.email == email)
        .order_by(Appointment.created_at.desc())
        .all()
    )


def attach_payment_intent(
    db: Session,
    *,
    appointment_id: UUID,
    payment_intent_id: str,
    confirmed: bool = False,
) -> Appointment:
    appointment = get_appointment(db, appointment_id)
    appointment.payment_intent_id = payment_intent_id
    if confirmed:
        appointment.status = AppointmentStatus.CONFIRMED

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(
            "Failed to record payment %s on appointment %s",
            payment_intent_id,
            appointment_id,
        )
        raise PersistenceError("Failed to update appointment payment.")

    db.refresh(appointment)
    return appointment
