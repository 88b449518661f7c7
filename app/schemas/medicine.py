# schemas/medicine.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from app.schemas.base import CamelModel


class MedicineResponse(CamelModel):
    id: UUID
    name: str
    brand: str
    dosage: str
    category: str
    description: str
    price: Decimal
    prescription_required: bool
    in_stock: bool
    stock_count: int
    rating: Decimal
    reviews: int
    created_at: datetime
