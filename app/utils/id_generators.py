# app/utils/id_generators.py
import hashlib
import time

from sqlalchemy.orm import Session

from app.models.order import Order

CARRIERS = ("FedEx", "UPS", "USPS")

CARRIER_PREFIXES = {
    "FedEx": "FDX",
    "UPS": "1Z",
    "USPS": "9400",
}


def _millis() -> int:
    return time.time_ns() // 1_000_000


def generate_order_number(db: Session, year: int) -> str:
    """
    Generate a unique order number in format: ORD-{year}-{sequential}

    Where:
    - {year} = year the order is placed
    - {sequential} = last 6 digits of the current millisecond clock

    If the candidate is already taken (burst creation within the same
    millisecond, or wrap-around), the counter is advanced until free.

    Example: ORD-2026-482913
    """
    prefix = f"ORD-{year}-"
    seq = _millis() % 1_000_000

    for _ in range(1_000_000):
        candidate = f"{prefix}{seq:06d}"
        # autoflush is off, so pending orders in this session are checked too
        taken = any(
            isinstance(obj, Order) and obj.order_number == candidate
            for obj in db.new
        ) or (
            db.query(Order.id).filter(Order.order_number == candidate).first()
            is not None
        )
        if not taken:
            return candidate
        seq = (seq + 1) % 1_000_000

    raise RuntimeError(f"Order number space exhausted for {year}")


def generate_tracking_number(db: Session) -> str:
    """
    Generate a tracking number in format: TRK{9 digits}

    The digits are the last 9 of the millisecond clock, advanced on
    collision like generate_order_number.

    Example: TRK104882913
    """
    seq = _millis() % 1_000_000_000

    while True:
        candidate = f"TRK{seq:09d}"
        taken = (
            db.query(Order.id).filter(Order.tracking_number == candidate).first()
            is not None
        )
        if not taken:
            return candidate
        seq = (seq + 1) % 1_000_000_000


def _digest(order_number: str) -> bytes:
    return hashlib.sha256(order_number.encode("utf-8")).digest()


def carrier_for_order(order_number: str) -> str:
    """
    Pick a carrier from the order number.

    Deterministic across requests and processes (no built-in hash()
    randomisation), so tracking shows the same carrier on every read.
    """
    return CARRIERS[_digest(order_number)[0] % len(CARRIERS)]


def display_tracking_number(order_number: str, carrier: str) -> str:
    """
    Display-only tracking number for orders that have not been
    confirmed yet: {carrier prefix}{12 digits derived from the order number}.
    """
    digits = int.from_bytes(_digest(order_number)[1:9], "big") % 10**12
    return f"{CARRIER_PREFIXES[carrier]}{digits:012d}"
