# app/models/prescription.py
import uuid
from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import (
    DateTime,
    Enum,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base
from app.utils.datetime_utils import utc_now


class PrescriptionStatus(str, PyEnum):
    PENDING = "pending"
    VERIFIED = "verified"
    FULFILLED = "fulfilled"


PRESCRIPTION_STATUS_ENUM = Enum(
    PrescriptionStatus,
    name="prescription_status_enum",
    native_enum=False,
    length=20,
    values_callable=lambda enum_cls: [member.value for member in enum_cls],
)


class Prescription(Base):
    """
    A prescription uploaded by a patient for pharmacist verification.
    """

    __tablename__ = "prescriptions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    patient_name: Mapped[str] = mapped_column(String(255), nullable=False)
    patient_email: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    doctor_name: Mapped[str] = mapped_column(String(255), nullable=False)
    doctor_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    medications: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Free-text medication list as entered by the patient",
    )

    status: Mapped[PrescriptionStatus] = mapped_column(
        PRESCRIPTION_STATUS_ENUM,
        nullable=False,
        default=PrescriptionStatus.PENDING,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

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
