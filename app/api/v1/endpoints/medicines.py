# app/api/v1/endpoints/medicines.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.medicine import MedicineResponse
from app.services.medicine_service import get_medicine, list_medicines

router = APIRouter()


@router.get("", response_model=list[MedicineResponse])
def list_medicines_endpoint(
    category: Optional[str] = Query(
        None, description="Exact category tag, e.g. vitamins ('all' for no filter)"
    ),
    search: Optional[str] = Query(
        None, description="Search by name, description or brand (case-insensitive)"
    ),
    db: Session = Depends(get_db),
) -> list[MedicineResponse]:
    """
    List the pharmacy catalog.
    """
    medicines = list_medicines(db, category=category, search=search)
    return [MedicineResponse.model_validate(m) for m in medicines]


@router.get("/{medicine_id}", response_model=MedicineResponse)
def get_medicine_endpoint(
    medicine_id: UUID,
    db: Session = Depends(get_db),
) -> MedicineResponse:
    return MedicineResponse.model_validate(get_medicine(db, medicine_id))
