# app/services/seed_service.py
import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.clinic_service import ClinicService
from app.models.medicine import Medicine

logger = logging.getLogger(__name__)

# Clinic services offered for booking
DEFAULT_SERVICES = [
    {
        "name": "General Medicine",
        "category": "primary-care",
        "description": "Comprehensive primary care services including routine check-ups, preventive care, and treatment of common illnesses.",
        "duration": 45,
        "price": Decimal("75.00"),
    },
    {
        "name": "Cardiology Consultation",
        "category": "specialty",
        "description": "Specialized cardiac care including heart health assessments, ECG, and cardiovascular disease management.",
        "duration": 60,
        "price": Decimal("150.00"),
    },
    {
        "name": "Mental Health Counseling",
        "category": "mental-health",
        "description": "Professional mental health support including therapy sessions, stress management, and emotional wellness.",
        "duration": 90,
        "price": Decimal("120.00"),
    },
    {
        "name": "Pediatric Care",
        "category": "pediatrics",
        "description": "Specialized healthcare for children including wellness checks, vaccinations, and developmental assessments.",
        "duration": 30,
        "price": Decimal("85.00"),
    },
]

# Pharmacy catalog: (name, category, brand, dosage, price, stock, rx, rating, reviews, description)
DEFAULT_MEDICINES = [
    (
        "Acetaminophen 500mg", "pain-relief", "Generic", "500mg tablets",
        "12.99", 150, False, "4.5", 324,
        "Pain reliever and fever reducer. Non-prescription pain medication for headaches, muscle aches, and arthritis.",
    ),
    (
        "Lisinopril 10mg", "cardiovascular", "Prinivil", "10mg tablets",
        "24.99", 75, True, "4.2", 186,
        "ACE inhibitor for high blood pressure and heart failure. Requires prescription from healthcare provider.",
    ),
    (
        "Metformin 500mg", "diabetes", "Glucophage", "500mg XR tablets",
        "18.50", 120, True, "4.7", 298,
        "Diabetes medication to control blood sugar levels. Extended-release formula for better compliance.",
    ),
    (
        "Vitamin D3 2000 IU", "vitamins", "Nature Made", "2000 IU softgels",
        "15.99", 200, False, "4.6", 412,
        "Bone health supplement. Supports immune system and calcium absorption for strong bones.",
    ),
    (
        "Amoxicillin 500mg", "antibiotics", "Amoxil", "500mg capsules",
        "32.00", 45, True, "4.3", 156,
        "Antibiotic for bacterial infections. Treats respiratory, urinary tract, and skin infections.",
    ),
    (
        "Omega-3 Fish Oil", "vitamins", "Nordic Naturals", "1000mg softgels",
        "22.99", 180, False, "4.8", 523,
        "Heart health supplement with EPA and DHA. Supports cardiovascular and brain health.",
    ),
]


def build_medicine(
    name: str,
    category: str,
    brand: str,
    dosage: str,
    price: str,
    stock_count: int,
    prescription_required: bool = False,
    rating: str = "0",
    reviews: int = 0,
    description: str = "",
) -> Medicine:
    return Medicine(
        name=name,
        category=category,
        brand=brand,
        dosage=dosage,
        price=Decimal(price),
        stock_count=stock_count,
        in_stock=stock_count > 0,
        prescription_required=prescription_required,
        rating=Decimal(rating),
        reviews=reviews,
        description=description or name,
    )


def seed_catalog(db: Session) -> dict[str, int]:
    """
    Insert default clinic services and medicines if their tables are empty.
    Idempotent. Does NOT commit; the caller owns the transaction.

    Returns how many rows of each kind were added.
    """
    added = {"services": 0, "medicines": 0}

    if db.query(ClinicService.id).first() is None:
        for data in DEFAULT_SERVICES:
            db.add(ClinicService(available=True, **data))
        added["services"] = len(DEFAULT_SERVICES)

    if db.query(Medicine.id).first() is None:
        for row in DEFAULT_MEDICINES:
            db.add(build_medicine(*row))
        added["medicines"] = len(DEFAULT_MEDICINES)

    if any(added.values()):
        logger.info(
            "Seeded %d clinic services and %d medicines",
            added["services"],
            added["medicines"],
        )
    return added


def reset_catalog(db: Session) -> None:
    """
    Delete seeded clinic services and medicines that no order references.
    Does NOT commit.
    """
    from app.models.order import OrderItem

    referenced = select(OrderItem.medicine_id)
    db.query(Medicine).filter(Medicine.id.not_in(referenced)).delete(
        synchronize_session=False
    )
    db.query(ClinicService).delete(synchronize_session=False)
