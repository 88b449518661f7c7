# app/services/medicine_service.py
from uuid import UUID

from sqlalchemy import or_, update
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.medicine import Medicine
from app.utils.datetime_utils import utc_now


def list_medicines(
    db: Session,
    *,
    category: str | None = None,
    search: str | None = None,
) -> list[Medicine]:
    """
    Catalog listing. category is an exact tag match; search is a
    case-insensitive substring over name, description and brand.
    """
    query = db.query(Medicine)

    if category and category != "all":
        query = query.filter(Medicine.category == category)

    if search and search.strip():
        search_term = f"%{search.strip()}%"
        query = query.filter(
            or_(
                Medicine.name.ilike(search_term),
                Medicine.description.ilike(search_term),
                Medicine.brand.ilike(search_term),
            )
        )

    return query.order_by(Medicine.name.asc()).all()


def get_medicine(db: Session, medicine_id: UUID) -> Medicine:
    medicine = db.get(Medicine, medicine_id)
    if not medicine:
        raise NotFoundError(f"Medicine not found: {medicine_id}")
    return medicine


def decrement_stock(db: Session, medicine_id: UUID, quantity: int) -> bool:
    """
    Atomically take `quantity` units out of stock.

    Single conditional UPDATE, so concurrent confirmations serialize on the
    row and stock_count never goes below zero. Returns False (and changes
    nothing) when fewer than `quantity` units remain.

    Does NOT commit; the caller owns the transaction.
    """
    remaining = Medicine.stock_count - quantity
    result = db.execute(
        update(Medicine)
        .where(Medicine.id == medicine_id, Medicine.stock_count >= quantity)
        .values(
            stock_count=remaining,
            in_stock=remaining > 0,
            updated_at=utc_now(),
        )
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1
