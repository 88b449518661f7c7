# app/services/pharmacy_service.py
"""
Prescription uploads and pharmacist consultations.
"""
from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, PersistenceError
from app.models.consultation import Consultation, ConsultationStatus
from app.models.prescription import Prescription, PrescriptionStatus
from app.schemas.pharmacy import (
    ConsultationCreate,
    ConsultationStatusUpdate,
    PrescriptionCreate,
    PrescriptionStatusUpdate,
)

logger = logging.getLogger(__name__)


def _commit(db: Session, what: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to save %s", what)
        raise PersistenceError(f"Failed to save {what}.")


def create_prescription(db: Session, *, payload: PrescriptionCreate) -> Prescription:
    prescription = Prescription(
        patient_name=payload.patient_name,
        patient_email=str(payload.patient_email),
        doctor_name=payload.doctor_name,
        doctor_phone=payload.doctor_phone,
        medications=payload.medications,
        notes=payload.notes,
        status=PrescriptionStatus.PENDING,
    )
    db.add(prescription)
    _commit(db, "prescription")
    db.refresh(prescription)
    return prescription


def list_prescriptions_for_email(db: Session, email: str) -> list[Prescription]:
    return (
        db.query(Prescription)
        .filter(Prescription.patient_email == email)
        .order_by(Prescription.created_at.desc())
        .all()
    )


def update_prescription_status(
    db: Session,
    *,
    prescription_id: UUID,
    payload: PrescriptionStatusUpdate,
) -> Prescription:
    prescription = db.get(Prescription, prescription_id)
    if not prescription:
        raise NotFoundError("Prescription not found")

    prescription.status = payload.status
    if payload.notes:
        prescription.notes = payload.notes

    _commit(db, "prescription")
    db.refresh(prescription)
    return prescription


def create_consultation(db: Session, *, payload: ConsultationCreate) -> Consultation:
    consultation = Consultation(
        patient_name=payload.patient_name,
        patient_email=str(payload.patient_email),
        patient_phone=payload.patient_phone,
        consultation_type=payload.consultation_type,
        preferred_date=payload.preferred_date,
        preferred_time=payload.preferred_time,
        questions=payload.questions,
        status=ConsultationStatus.SCHEDULED,
    )
    db.add(consultation)
    _commit(db, "consultation")
    db.refresh(consultation)
    return consultation


def list_consultations_for_email(db: Session, email: str) -> list[Consultation]:
    return (
        db.query(Consultation)
        .filter(Consultation.patient_email == email)
        .order_by(Consultation.created_at.desc())
        .all()
    )


def update_consultation_status(
    db: Session,
    *,
    consultation_id: UUID,
    payload: ConsultationStatusUpdate,
) -> Consultation:
    consultation = db.get(Consultation, consultation_id)
    if not consultation:
        raise NotFoundError("Consultation not found")

    consultation.status = payload.status
    if payload.pharmacist_notes:
        consultation.pharmacist_notes = payload.pharmacist_notes

    _commit(db, "consultation")
    db.refresh(consultation)
    return consultation
