# app/services/catalog_service.py
from sqlalchemy.orm import Session

from app.models.clinic_service import ClinicService


def list_clinic_services(db: Session) -> list[ClinicService]:
    return (
        db.query(ClinicService)
        .filter(ClinicService.available.is_(True))
        .order_by(ClinicService.name.asc())
        .all()
    )
