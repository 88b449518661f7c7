# app/models/appointment.py
import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum as PyEnum

from sqlalchemy import (
    DateTime,
    Enum,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base
from app.utils.datetime_utils import utc_now


class AppointmentStatus(str, PyEnum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


APPOINTMENT_STATUS_ENUM = Enum(
    AppointmentStatus,
    name="appointment_status_enum",
    native_enum=False,
    length=20,
    values_callable=lambda enum_cls: [member.value for member in enum_cls],
)


class Appointment(Base):
    __tablename__ = "appointments"

    # Primary Key
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Patient details
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)

    # Appointment Details
    service: Mapped[str] = mapped_column(String(255), nullable=False)
    appointment_date: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        doc="Date as chosen in the booking form, e.g. 2026-10-20",
    )
    appointment_time: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        doc="Slot as chosen in the booking form, e.g. 09:00",
    )
    language_preference: Mapped[str] = mapped_column(
        String(50), nullable=False, default="english"
    )
    accommodation_needs: Mapped[str | None] = mapped_column(Text, nullable=True)
    additional_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[AppointmentStatus] = mapped_column(
        APPOINTMENT_STATUS_ENUM,
        nullable=False,
        default=AppointmentStatus.SCHEDULED,
    )

    # Appointment fee
    payment_intent_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
