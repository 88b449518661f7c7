# app/schemas/pharmacy.py
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr

from app.models.consultation import ConsultationStatus, ConsultationType
from app.models.prescription import PrescriptionStatus
from app.schemas.base import (
    CamelModel,
    LongTextStr,
    NameStr,
    OptStr500,
    PhoneStr,
    RequiredStr,
)


class PrescriptionCreate(CamelModel):
    patient_name: NameStr
    patient_email: EmailStr
    doctor_name: NameStr
    doctor_phone: PhoneStr
    medications: LongTextStr
    notes: OptStr500 = None


class PrescriptionStatusUpdate(CamelModel):
    status: PrescriptionStatus
    notes: OptStr500 = None


class PrescriptionResponse(CamelModel):
    id: UUID
    patient_name: str
    patient_email: str
    doctor_name: str
    doctor_phone: str
    medications: str
    status: PrescriptionStatus
    notes: str | None
    created_at: datetime


class ConsultationCreate(CamelModel):
    patient_name: NameStr
    patient_email: EmailStr
    patient_phone: PhoneStr
    consultation_type: ConsultationType
    preferred_date: RequiredStr
    preferred_time: RequiredStr
    questions: LongTextStr


class ConsultationStatusUpdate(CamelModel):
    status: ConsultationStatus
    pharmacist_notes: OptStr500 = None


class ConsultationResponse(CamelModel):
    id: UUID
    patient_name: str
    patient_email: str
    patient_phone: str
    consultation_type: ConsultationType
    preferred_date: str
    preferred_time: str
    questions: str
    status: ConsultationStatus
    pharmacist_notes: str | None
    created_at: datetime
