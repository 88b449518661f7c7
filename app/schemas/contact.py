# app/schemas/contact.py
from datetime import datetime
from uuid import UUID

from pydantic import EmailStr

from app.models.contact_message import ContactMessageStatus
from app.schemas.base import CamelModel, LongTextStr, NameStr, OptStr500


class ContactMessageCreate(CamelModel):
    name: NameStr
    email: EmailStr
    subject: OptStr500 = None
    message: LongTextStr
    preferred_language: str = "english"


class ContactMessageResponse(CamelModel):
    id: UUID
    name: str
    email: str
    subject: str | None
    message: str
    preferred_language: str
    status: ContactMessageStatus
    created_at: datetime
