# app/services/contact_service.py
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.models.contact_message import ContactMessage, ContactMessageStatus
from app.schemas.contact import ContactMessageCreate


def create_contact_message(
    db: Session,
    *,
    payload: ContactMessageCreate,
) -> ContactMessage:
    message = ContactMessage(
        name=payload.name,
        email=str(payload.email),
        subject=payload.subject,
        message=payload.message,
        preferred_language=payload.preferred_language,
        status=ContactMessageStatus.UNREAD,
    )
    try:
        db.add(message)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise PersistenceError("Failed to save contact message.")

    db.refresh(message)
    return message


def list_contact_messages(db: Session) -> list[ContactMessage]:
    return db.query(ContactMessage).order_by(ContactMessage.created_at.desc()).all()
