# app/api/v1/endpoints/appointments.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.schemas.appointment import AppointmentCreate, AppointmentResponse
from app.services.appointment_service import (
    create_appointment,
    list_appointments_for_email,
)

router = APIRouter()


@router.post(
    "",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_appointment_endpoint(
    payload: AppointmentCreate,
    db: Session = Depends(get_db),
) -> AppointmentResponse:
    """
    Book an appointment. The booking starts as scheduled; paying the fee
    through /create-payment-intent and /confirm-payment confirms it.
    """
    settings = get_settings()
    appointment = create_appointment(db, payload=payload, fee=settings.appointment_fee)
    return AppointmentResponse.model_validate(appointment)


@router.get("/{email}", response_model=list[AppointmentResponse])
def list_appointments_endpoint(
    email: EmailStr,
    db: Session = Depends(get_db),
) -> list[AppointmentResponse]:
    return [
        AppointmentResponse.model_validate(a)
        for a in list_appointments_for_email(db, str(email))
    ]
