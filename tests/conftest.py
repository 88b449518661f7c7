# tests/conftest.py
import os

# Settings are cached on first import; keep tests off the local dev database.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("PAYMENT_BACKEND", "sandbox")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.core.database import get_db
from app.main import app
from app.models.base import Base
from app.models.medicine import Medicine
from app.payments.base import get_payment_gateway
from app.payments.sandbox_client import SandboxGateway
from app.services.seed_service import seed_catalog


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, future=True)
    session = TestingSession()
    seed_catalog(session)
    session.commit()
    yield session
    session.close()


@pytest.fixture
def gateway():
    return SandboxGateway(auto_succeed=False)


@pytest.fixture
def client(db, gateway):
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def medicines(db) -> dict[str, Medicine]:
    """Seeded catalog keyed by medicine name."""
    return {m.name: m for m in db.query(Medicine).all()}


@pytest.fixture
def order_payload():
    return _order_payload


def _order_payload(lines, email="jane@example.com", name="Jane Doe", **extra) -> dict:
    """Checkout body in the web client's camelCase format."""
    payload = {
        "items": [
            {"medicineId": str(medicine.id), "quantity": quantity}
            for medicine, quantity in lines
        ],
        "customerInfo": {"email": email, "name": name, "phone": "555-0100"},
        "shippingAddress": "12 Elm Street, Springfield",
    }
    payload.update(extra)
    return payload
