# app/schemas/clinic_service.py
from decimal import Decimal
from uuid import UUID

from app.schemas.base import CamelModel


class ClinicServiceResponse(CamelModel):
    id: UUID
    name: str
    category: str
    description: str
    duration: int | None
    price: Decimal | None
    available: bool
