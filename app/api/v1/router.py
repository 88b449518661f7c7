# app/api/v1/router.py
from fastapi import APIRouter

from app.api.v1.endpoints import (
    appointments,
    clinic_services,
    contact,
    medicines,
    orders,
    payments,
    pharmacy,
)

api_router = APIRouter()

api_router.include_router(medicines.router, prefix="/medicines", tags=["medicines"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(clinic_services.router, prefix="/services", tags=["services"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(payments.router, tags=["payments"])
api_router.include_router(contact.router, prefix="/contact", tags=["contact"])
api_router.include_router(pharmacy.router, prefix="/pharmacy", tags=["pharmacy"])
