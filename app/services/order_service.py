# app/services/order_service.py
from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.core.config import get_settings
from app.core.exceptions import (
    InsufficientStockError,
    NotFoundError,
    PaymentNotSuccessfulError,
    PersistenceError,
    ValidationError,
)
from app.models.medicine import Medicine
from app.models.order import Order, OrderItem, OrderStatus
from app.payments.base import PaymentGateway
from app.schemas.order import OrderCreate
from app.services.medicine_service import decrement_stock
from app.utils.datetime_utils import estimated_delivery_date, utc_now
from app.utils.id_generators import (
    carrier_for_order,
    generate_order_number,
    generate_tracking_number,
)
from app.utils.money import quantize_money, to_minor_units

logger = logging.getLogger(__name__)


def create_order(
    db: Session,
    gateway: PaymentGateway,
    *,
    payload: OrderCreate,
    now: datetime | None = None,
) -> tuple[Order, str]:
    """
    Create a pending order and its payment intent.

    Every line is checked against committed stock before anything is
    written or any intent is requested. Stock is NOT taken here; that
    happens in confirm_payment once the provider reports success.

    Returns (order, client_secret).
    """
    settings = get_settings()
    now = now or utc_now()

    # 1) Validate every line first (no writes yet)
    lines: list[tuple[Medicine, int]] = []
    requested: dict[UUID, int] = defaultdict(int)
    for item in payload.items:
        medicine = db.get(Medicine, item.medicine_id)
        if medicine is None:
            # 400 like the stock check below
            raise ValidationError(f"Medicine not found: {item.medicine_id}")
        requested[medicine.id] += item.quantity
        if not medicine.in_stock or medicine.stock_count < requested[medicine.id]:
            raise InsufficientStockError(
                medicine.name, medicine.stock_count, requested[medicine.id]
            )
        lines.append((medicine, item.quantity))

    total = quantize_money(
        sum((medicine.price * quantity for medicine, quantity in lines), Decimal("0"))
    )

    order_number = generate_order_number(db, now.year)
    customer = payload.customer_info

    # 2) Payment intent (GatewayError propagates; nothing persisted yet)
    intent = gateway.create_intent(
        amount=to_minor_units(total),
        currency=settings.payment_currency,
        description=f"HealthCare Plus Pharmacy Order {order_number}",
        metadata={
            "order_number": order_number,
            "customer_email": str(customer.email),
            "purpose": "pharmacy",
        },
    )

    # 3) Persist order + snapshotted lines
    order = Order(
        order_number=order_number,
        customer_email=str(customer.email),
        customer_name=customer.name,
        customer_phone=customer.phone,
        shipping_address=payload.shipping_address,
        delivery_instructions=payload.delivery_instructions,
        total=total,
        status=OrderStatus.PENDING,
        payment_intent_id=intent.id,
        estimated_delivery=estimated_delivery_date(
            now, settings.estimated_delivery_days
        ),
        created_at=now,
        updated_at=now,
    )
    for position, (medicine, quantity) in enumerate(lines):
        order.items.append(
            OrderItem(
                medicine_id=medicine.id,
                medicine_name=medicine.name,
                position=position,
                quantity=quantity,
                price=medicine.price,
            )
        )

    try:
        db.add(order)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(
            "Failed to persist order %s; payment intent %s is orphaned",
            order_number,
            intent.id,
        )
        raise PersistenceError("Failed to create order.")

    db.refresh(order)
    logger.info(
        "Created order %s total=%s items=%d intent=%s",
        order.order_number,
        order.total,
        len(order.items),
        intent.id,
    )
    return order, intent.client_secret


def confirm_payment(
    db: Session,
    gateway: PaymentGateway,
    *,
    payment_intent_id: str,
    order_number: str,
) -> Order:
    """
    Confirm an order after the customer has paid.

    The provider is re-queried (the client's word is not trusted). Only a
    "succeeded" intent moves the order to CONFIRMED; anything else leaves
    order and stock untouched.

    Confirmation, tracking number and all stock decrements commit in one
    transaction. If stock ran out since checkout the whole transaction is
    rolled back and the order is CANCELLED (payment needs a manual refund).

    Calling again for an already-confirmed order returns it unchanged.
    """
    order = get_order_by_number(db, order_number)

    if order.payment_intent_id != payment_intent_id:
        raise ValidationError("Payment intent does not match this order.")

    if order.status == OrderStatus.CANCELLED:
        raise ValidationError(f"Order {order_number} has been cancelled.")

    if order.status != OrderStatus.PENDING:
        return order

    intent = gateway.retrieve_intent(payment_intent_id)
    if not intent.succeeded:
        logger.warning(
            "Payment not successful order=%s intent=%s status=%s",
            order_number,
            payment_intent_id,
            intent.status,
        )
        raise PaymentNotSuccessfulError()

    order_id = order.id
    try:
        # Claim the order first: only one concurrent confirmation can move
        # it out of PENDING, and only that one takes stock.
        claim = db.execute(
            update(Order)
            .where(Order.id == order_id, Order.status == OrderStatus.PENDING)
            .values(
                status=OrderStatus.CONFIRMED,
                tracking_number=generate_tracking_number(db),
                carrier=carrier_for_order(order.order_number),
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        if claim.rowcount != 1:
            db.rollback()
            return _already_settled(db, order)

        for item in order.items:
            if not decrement_stock(db, item.medicine_id, item.quantity):
                raise InsufficientStockError(
                    item.medicine_name,
                    _current_stock(db, item.medicine_id),
                    item.quantity,
                )

        db.commit()
    except InsufficientStockError:
        db.rollback()
        _cancel_after_stock_exhausted(db, order_id, payment_intent_id)
        raise
    except SQLAlchemyError:
        db.rollback()
        logger.exception(
            "Failed to confirm order %s (intent %s); order left pending",
            order_number,
            payment_intent_id,
        )
        raise PersistenceError("Failed to confirm order.")

    db.refresh(order)
    logger.info(
        "Confirmed order %s tracking=%s carrier=%s",
        order.order_number,
        order.tracking_number,
        order.carrier,
    )
    return order


def _already_settled(db: Session, order: Order) -> Order:
    """
    Another request confirmed or cancelled the order while this one was
    waiting on the provider.
    """
    db.refresh(order)
    if order.status == OrderStatus.CANCELLED:
        raise ValidationError(f"Order {order.order_number} has been cancelled.")

    logger.info(
        "Order %s already confirmed by a concurrent request", order.order_number
    )
    return order


def _current_stock(db: Session, medicine_id: UUID) -> int:
    stock = db.query(Medicine.stock_count).filter(Medicine.id == medicine_id).scalar()
    return stock or 0


def _cancel_after_stock_exhausted(
    db: Session, order_id: UUID, payment_intent_id: str
) -> None:
    order = db.get(Order, order_id)
    order.status = OrderStatus.CANCELLED
    order.updated_at = utc_now()
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to cancel order %s", order.order_number)
        raise PersistenceError("Failed to cancel order.")

    # Paid but not fulfillable: an operator has to refund this intent.
    logger.error(
        "Order %s cancelled at confirmation: stock exhausted. "
        "Payment intent %s succeeded and needs a refund.",
        order.order_number,
        payment_intent_id,
    )


def get_order_by_number(db: Session, order_number: str) -> Order:
    order = (
        db.query(Order)
        .options(selectinload(Order.items))
        .filter(Order.order_number == order_number)
        .first()
    )
    if not order:
        raise NotFoundError(f"Order not found: {order_number}")
    return order


def list_orders_for_email(db: Session, email: str) -> list[Order]:
    return (
        db.query(Order)
        .options(selectinload(Order.items))
        .filter(Order.customer_email == email)
        .order_by(Order.created_at.desc())
        .all()
    )
