# app/models/medicine.py
import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base
from app.utils.datetime_utils import utc_now


class Medicine(Base):
    """
    A product in the online pharmacy catalog.

    in_stock mirrors stock_count > 0; both are only ever changed together
    (seeding and order confirmation).
    """

    __tablename__ = "medicines"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    brand: Mapped[str] = mapped_column(String(255), nullable=False)
    dosage: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        doc="e.g., 500mg tablets, 2000 IU softgels",
    )
    category: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        doc="Catalog tag, e.g. pain-relief, cardiovascular, vitamins",
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)

    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    prescription_required: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    stock_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    rating: Mapped[Decimal] = mapped_column(
        Numeric(2, 1), nullable=False, default=Decimal("0")
    )
    reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )
