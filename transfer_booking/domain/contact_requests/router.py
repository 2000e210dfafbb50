"""Contact request router - FastAPI endpoints for the contact form"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import config
from ...database import get_db
from ...email_service import EmailService, get_email_service
from ...shared.errors import ValidationError
from ..submissions.service import MAX_PAGE, MAX_PAGE_SIZE
from .schemas import ContactRequestCreate, ContactRequestResponse, ContactRequestUpdate
from .service import ContactRequestService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact-requests", tags=["Contact Requests"])


def get_contact_request_service(
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> ContactRequestService:
    """Dependency injection for ContactRequestService"""
    return ContactRequestService(
        db,
        email_service,
        recipient=config.CONTACT_FORM_EMAIL,
        site_name=config.EMAIL_FROM_NAME,
    )


def to_response(contact_request) -> ContactRequestResponse:
    return ContactRequestResponse.model_validate(contact_request)


@router.get("")
async def list_contact_requests(
    status: Optional[str] = Query(None),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    service: ContactRequestService = Depends(get_contact_request_service),
):
    """List contact requests, newest first, with optional status filter"""
    result = service.list_requests(status, page, limit)
    return {
        "items": [to_response(r) for r in result["items"]],
        "pagination": result["pagination"],
    }


@router.get("/{request_id}")
async def get_contact_request(
    request_id: int,
    service: ContactRequestService = Depends(get_contact_request_service),
):
    return to_response(service.get_request(request_id))


@router.post("")
async def create_contact_request(
    data: ContactRequestCreate,
    service: ContactRequestService = Depends(get_contact_request_service),
):
    """Submit the contact form; staff are emailed when email is configured"""
    contact_request = await service.create_request(data.model_dump())
    return {"success": True, "contactRequest": to_response(contact_request)}


@router.put("")
async def update_contact_request(
    data: ContactRequestUpdate,
    service: ContactRequestService = Depends(get_contact_request_service),
):
    if not data.id:
        raise ValidationError("Request ID is required")

    contact_request = service.update_request(data.id, data.model_dump(exclude_unset=True))
    return {"success": True, "contactRequest": to_response(contact_request)}


@router.delete("")
async def delete_contact_request(
    request_id: Optional[int] = Query(None, alias="id"),
    service: ContactRequestService = Depends(get_contact_request_service),
):
    if not request_id:
        raise ValidationError("Request ID is required")

    service.delete_request(request_id)
    return {"success": True}
