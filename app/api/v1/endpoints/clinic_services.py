# app/api/v1/endpoints/clinic_services.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.clinic_service import ClinicServiceResponse
from app.services.catalog_service import list_clinic_services

router = APIRouter()


@router.get("", response_model=list[ClinicServiceResponse])
def list_services_endpoint(db: Session = Depends(get_db)) -> list[ClinicServiceResponse]:
    """
    Clinic services currently open for booking.
    """
    return [ClinicServiceResponse.model_validate(s) for s in list_clinic_services(db)]
