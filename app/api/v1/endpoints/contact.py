# app/api/v1/endpoints/contact.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.contact import ContactMessageCreate, ContactMessageResponse
from app.services.contact_service import create_contact_message, list_contact_messages

router = APIRouter()


@router.post(
    "",
    response_model=ContactMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_contact_message_endpoint(
    payload: ContactMessageCreate,
    db: Session = Depends(get_db),
) -> ContactMessageResponse:
    return ContactMessageResponse.model_validate(
        create_contact_message(db, payload=payload)
    )


@router.get("", response_model=list[ContactMessageResponse])
def list_contact_messages_endpoint(
    db: Session = Depends(get_db),
) -> list[ContactMessageResponse]:
    return [ContactMessageResponse.model_validate(m) for m in list_contact_messages(db)]
