# app/schemas/appointment.py
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import EmailStr

from app.models.appointment import AppointmentStatus
from app.schemas.base import CamelModel, NameStr, OptStr500, PhoneStr, RequiredStr


class AppointmentCreate(CamelModel):
    first_name: NameStr
    last_name: NameStr
    email: EmailStr
    phone: PhoneStr
    service: RequiredStr
    appointment_date: RequiredStr
    appointment_time: RequiredStr
    language_preference: str = "english"
    accommodation_needs: OptStr500 = None
    additional_notes: OptStr500 = None


class AppointmentResponse(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str
    service: str
    appointment_date: str
    appointment_time: str
    language_preference: str
    accommodation_needs: str | None
    additional_notes: str | None
    status: AppointmentStatus
    payment_intent_id: str | None
    amount: Decimal
    created_at: datetime
