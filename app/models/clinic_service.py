# app/models/clinic_service.py
import uuid
from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class ClinicService(Base):
    """
    A bookable clinic service (General Medicine, Cardiology, ...).
    """

    __tablename__ = "services"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        doc="Length of a visit in minutes",
    )
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
