# app/models/consultation.py
import uuid
from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import DateTime, Enum, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base
from app.utils.datetime_utils import utc_now


class ConsultationType(str, PyEnum):
    MEDICATION_REVIEW = "medication-review"
    DRUG_INTERACTION = "drug-interaction"
    SIDE_EFFECTS = "side-effects"
    GENERAL = "general"


class ConsultationStatus(str, PyEnum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def _values(enum_cls):
    return [member.value for member in enum_cls]


class Consultation(Base):
    """
    A pharmacist consultation request (medication review, interactions, ...).
    """

    __tablename__ = "consultations"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    patient_name: Mapped[str] = mapped_column(String(255), nullable=False)
    patient_email: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    patient_phone: Mapped[str] = mapped_column(String(50), nullable=False)

    consultation_type: Mapped[ConsultationType] = mapped_column(
        Enum(
            ConsultationType,
            name="consultation_type_enum",
            native_enum=False,
            length=30,
            values_callable=_values,
        ),
        nullable=False,
    )
    preferred_date: Mapped[str] = mapped_column(String(20), nullable=False)
    preferred_time: Mapped[str] = mapped_column(String(20), nullable=False)
    questions: Mapped[str] = mapped_column(Text, nullable=False)

    status: Mapped[ConsultationStatus] = mapped_column(
        Enum(
            ConsultationStatus,
            name="consultation_status_enum",
            native_enum=False,
            length=20,
            values_callable=_values,
        ),
        nullable=False,
        default=ConsultationStatus.SCHEDULED,
    )
    pharmacist_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

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
