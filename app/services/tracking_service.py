# app/services/tracking_service.py
"""
Simulated shipment tracking.

There is no carrier integration: once an order is confirmed, its delivery
progress is derived on every read from the time elapsed since the order
was placed. Nothing here writes to the database, and the result depends
only on the order's persisted fields and `now`.

Stage timestamps are fixed offsets from created_at, so a completed step
keeps the same timestamp no matter how much later it is read.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from app.models.order import Order, OrderStatus
from app.schemas.order import ProgressStep, TrackingCustomerInfo, TrackingView
from app.utils.datetime_utils import as_utc
from app.utils.id_generators import carrier_for_order, display_tracking_number


@dataclass(frozen=True)
class Stage:
    label: str
    description: str
    offset: timedelta  # timestamp shown once completed
    completes_after: timedelta  # elapsed time at which the step is completed


STAGES: tuple[Stage, ...] = (
    Stage(
        "Order Placed",
        "We have received your order.",
        timedelta(0),
        timedelta(0),
    ),
    Stage(
        "Processing",
        "Our pharmacists are verifying and packing your medications.",
        timedelta(minutes=30),
        timedelta(0),
    ),
    Stage(
        "Shipped",
        "Your package has been handed over to the carrier.",
        timedelta(hours=2),
        timedelta(minutes=30),
    ),
    Stage(
        "In Transit",
        "Your package is on its way to your local delivery facility.",
        timedelta(hours=6),
        timedelta(hours=2),
    ),
    Stage(
        "Out for Delivery",
        "Your package is out for delivery and will arrive today.",
        timedelta(hours=48),
        timedelta(hours=48),
    ),
    Stage(
        "Delivered",
        "Your package has been delivered. Thank you for choosing HealthCare Plus.",
        timedelta(hours=72),
        timedelta(hours=72),
    ),
)

# Lower bound of each status band, latest first
STATUS_BANDS: tuple[tuple[timedelta, OrderStatus], ...] = (
    (timedelta(hours=72), OrderStatus.DELIVERED),
    (timedelta(hours=48), OrderStatus.OUT_FOR_DELIVERY),
    (timedelta(hours=2), OrderStatus.IN_TRANSIT),
    (timedelta(minutes=30), OrderStatus.SHIPPED),
    (timedelta(0), OrderStatus.CONFIRMED),
)


def status_for_elapsed(elapsed: timedelta) -> OrderStatus:
    for lower_bound, status in STATUS_BANDS:
        if elapsed >= lower_bound:
            return status
    return OrderStatus.CONFIRMED


def project_tracking(order: Order, now: datetime) -> TrackingView:
    """
    Compute the tracking view for `order` as of `now`.

    Only CONFIRMED orders move through the timeline. PENDING (unpaid) and
    CANCELLED orders report their own status with just "Order Placed".
    """
    created_at = as_utc(order.created_at)

    if order.status == OrderStatus.CONFIRMED:
        # Clock skew can put now slightly before created_at
        elapsed = max(as_utc(now) - created_at, timedelta(0))
        status = status_for_elapsed(elapsed)
        completed = [elapsed >= stage.completes_after for stage in STAGES]
    else:
        status = order.status
        completed = [index == 0 for index in range(len(STAGES))]

    steps = [
        ProgressStep(
            status=stage.label,
            description=stage.description,
            completed=done,
            timestamp=created_at + stage.offset if done else None,
        )
        for stage, done in zip(STAGES, completed)
    ]

    carrier = order.carrier or carrier_for_order(order.order_number)
    tracking_number = order.tracking_number or display_tracking_number(
        order.order_number, carrier
    )

    return TrackingView(
        order_number=order.order_number,
        status=status,
        tracking_number=tracking_number,
        carrier=carrier,
        estimated_delivery=order.estimated_delivery,
        progress_steps=steps,
        customer_info=TrackingCustomerInfo(
            name=order.customer_name,
            email=order.customer_email,
            phone=order.customer_phone,
            address=order.shipping_address,
        ),
        order_total=order.total,
        created_at=created_at,
    )
