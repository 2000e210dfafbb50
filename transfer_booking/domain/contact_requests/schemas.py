"""Contact request schemas - Pydantic models for the contact form API"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ContactRequestCreate(BaseModel):
    """Contact form submission; presence of required fields is checked by the service"""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None


class ContactRequestUpdate(BaseModel):
    """Partial update, only fields present in the body are applied"""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None


class ContactRequestResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str]
    message: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
