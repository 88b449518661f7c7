# schemas/order.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from app.models.order import OrderStatus
from app.schemas.base import CamelModel, OptStr500, RequiredStr


class OrderItemCreate(CamelModel):
    medicine_id: UUID
    quantity: int = Field(ge=1)


class CustomerInfo(CamelModel):
    email: EmailStr
    name: RequiredStr
    phone: OptStr500 = None

    @field_validator("phone", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class OrderCreate(CamelModel):
    items: list[OrderItemCreate] = Field(min_length=1)
    customer_info: CustomerInfo
    shipping_address: RequiredStr
    delivery_instructions: OptStr500 = None


class OrderItemResponse(CamelModel):
    id: UUID
    medicine_id: UUID
    medicine_name: str
    quantity: int
    price: Decimal


class OrderResponse(CamelModel):
    id: UUID
    order_number: str
    customer_email: str
    customer_name: str
    customer_phone: str | None
    shipping_address: str
    delivery_instructions: str | None = None
    total: Decimal
    status: OrderStatus
    payment_intent_id: str | None
    tracking_number: str | None
    carrier: str | None = None
    estimated_delivery: str
    created_at: datetime
    updated_at: datetime
    items: list[OrderItemResponse] = []


class OrderCreateResponse(CamelModel):
    order: OrderResponse
    order_number: str
    client_secret: str


class PaymentConfirmRequest(CamelModel):
    payment_intent_id: RequiredStr
    order_number: RequiredStr


class PaymentConfirmResponse(CamelModel):
    success: bool = True
    tracking_number: str


class ProgressStep(CamelModel):
    status: str
    description: str
    completed: bool
    timestamp: datetime | None = None


class TrackingCustomerInfo(CamelModel):
    name: str
    email: str
    phone: str | None = None
    address: str


class TrackingView(CamelModel):
    order_number: str
    status: OrderStatus
    tracking_number: str
    carrier: str
    estimated_delivery: str
    progress_steps: list[ProgressStep]
    customer_info: TrackingCustomerInfo
    order_total: Decimal
    created_at: datetime
