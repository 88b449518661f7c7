# tests/test_seed_service.py
from app.models.clinic_service import ClinicService
from app.models.medicine import Medicine
from app.schemas.order import OrderCreate
from app.services.order_service import create_order
from app.services.seed_service import reset_catalog, seed_catalog


def test_seed_is_idempotent(db):
    # the db fixture has already seeded once
    assert seed_catalog(db) == {"services": 0, "medicines": 0}
    assert db.query(Medicine).count() == 6
    assert db.query(ClinicService).count() == 4


def test_seeded_stock_flags(medicines):
    for medicine in medicines.values():
        assert medicine.in_stock is (medicine.stock_count > 0)


def test_reset_keeps_ordered_medicines(db, gateway, medicines, order_payload):
    metformin = medicines["Metformin 500mg"]
    payload = OrderCreate.model_validate(order_payload([(metformin, 1)]))
    create_order(db, gateway, payload=payload)

    reset_catalog(db)
    db.commit()

    assert [m.name for m in db.query(Medicine).all()] == ["Metformin 500mg"]
    assert db.query(ClinicService).count() == 0

    # re-seeding only fills tables that are empty
    assert seed_catalog(db) == {"services": 4, "medicines": 0}
