# app/api/v1/endpoints/orders.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from pydantic import EmailStr
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.payments.base import PaymentGateway, get_payment_gateway
from app.schemas.order import (
    OrderCreate,
    OrderCreateResponse,
    OrderResponse,
    PaymentConfirmRequest,
    PaymentConfirmResponse,
    TrackingView,
)
from app.services.order_service import (
    confirm_payment,
    create_order,
    get_order_by_number,
    list_orders_for_email,
)
from app.services.tracking_service import project_tracking
from app.utils.datetime_utils import utc_now

router = APIRouter()


@router.post(
    "",
    response_model=OrderCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_order_endpoint(
    payload: OrderCreate,
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> OrderCreateResponse:
    """
    Check out a cart. Returns the pending order and the client secret the
    browser needs to complete payment with the provider.
    """
    order, client_secret = create_order(db, gateway, payload=payload)
    return OrderCreateResponse(
        order=OrderResponse.model_validate(order),
        order_number=order.order_number,
        client_secret=client_secret,
    )


@router.post("/confirm", response_model=PaymentConfirmResponse)
def confirm_order_payment_endpoint(
    payload: PaymentConfirmRequest,
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> PaymentConfirmResponse:
    order = confirm_payment(
        db,
        gateway,
        payment_intent_id=payload.payment_intent_id,
        order_number=payload.order_number,
    )
    return PaymentConfirmResponse(success=True, tracking_number=order.tracking_number)


@router.get("/track/{order_number}", response_model=TrackingView)
def track_order_endpoint(
    order_number: str,
    db: Session = Depends(get_db),
) -> TrackingView:
    order = get_order_by_number(db, order_number)
    return project_tracking(order, utc_now())


@router.get("", response_model=list[OrderResponse])
def list_orders_endpoint(
    email: EmailStr = Query(..., description="Customer email used at checkout"),
    db: Session = Depends(get_db),
) -> list[OrderResponse]:
    return [
        OrderResponse.model_validate(o) for o in list_orders_for_email(db, str(email))
    ]


@router.get("/{order_number}", response_model=OrderResponse)
def get_order_endpoint(
    order_number: str,
    db: Session = Depends(get_db),
) -> OrderResponse:
    return OrderResponse.model_validate(get_order_by_number(db, order_number))
