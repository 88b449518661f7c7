# app/api/v1/endpoints/pharmacy.py
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import EmailStr
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.pharmacy import (
    ConsultationCreate,
    ConsultationResponse,
    ConsultationStatusUpdate,
    PrescriptionCreate,
    PrescriptionResponse,
    PrescriptionStatusUpdate,
)
from app.services.pharmacy_service import (
    create_consultation,
    create_prescription,
    list_consultations_for_email,
    list_prescriptions_for_email,
    update_consultation_status,
    update_prescription_status,
)

router = APIRouter()


# ----------------------------
# Prescriptions
# ----------------------------


@router.post(
    "/prescription",
    response_model=PrescriptionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_prescription_endpoint(
    payload: PrescriptionCreate,
    db: Session = Depends(get_db),
) -> PrescriptionResponse:
    """
    Submit a prescription for pharmacist review.
    """
    return PrescriptionResponse.model_validate(create_prescription(db, payload=payload))


@router.get("/prescriptions", response_model=list[PrescriptionResponse])
def list_prescriptions_endpoint(
    email: EmailStr = Query(..., description="Patient email"),
    db: Session = Depends(get_db),
) -> list[PrescriptionResponse]:
    return [
        PrescriptionResponse.model_validate(p)
        for p in list_prescriptions_for_email(db, str(email))
    ]


@router.patch("/prescriptions/{prescription_id}", response_model=PrescriptionResponse)
def update_prescription_endpoint(
    prescription_id: UUID,
    payload: PrescriptionStatusUpdate,
    db: Session = Depends(get_db),
) -> PrescriptionResponse:
    prescription = update_prescription_status(
        db, prescription_id=prescription_id, payload=payload
    )
    return PrescriptionResponse.model_validate(prescription)


# ----------------------------
# Consultations
# ----------------------------


@router.post(
    "/consultation",
    response_model=ConsultationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_consultation_endpoint(
    payload: ConsultationCreate,
    db: Session = Depends(get_db),
) -> ConsultationResponse:
    return ConsultationResponse.model_validate(create_consultation(db, payload=payload))


@router.get("/consultations", response_model=list[ConsultationResponse])
def list_consultations_endpoint(
    email: EmailStr = Query(..., description="Patient email"),
    db: Session = Depends(get_db),
) -> list[ConsultationResponse]:
    return [
        ConsultationResponse.model_validate(c)
        for c in list_consultations_for_email(db, str(email))
    ]


@router.patch("/consultations/{consultation_id}", response_model=ConsultationResponse)
def update_consultation_endpoint(
    consultation_id: UUID,
    payload: ConsultationStatusUpdate,
    db: Session = Depends(get_db),
) -> ConsultationResponse:
    consultation = update_consultation_status(
        db, consultation_id=consultation_id, payload=payload
    )
    return ConsultationResponse.model_validate(consultation)
