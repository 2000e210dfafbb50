"""Transfer request router - FastAPI endpoints for transfer bookings"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import config
from ...database import get_db
from ...email_service import EmailService, get_email_service
from ...shared.errors import ValidationError
from ..submissions.service import MAX_PAGE, MAX_PAGE_SIZE
from .schemas import TransferRequestCreate, TransferRequestResponse, TransferRequestUpdate
from .service import TransferRequestService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transfer-requests", tags=["Transfer Requests"])


def get_transfer_request_service(
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> TransferRequestService:
    """Dependency injection for TransferRequestService"""
    return TransferRequestService(
        db,
        email_service,
        recipient=config.TRANSFER_REQUEST_EMAIL,
        site_name=config.EMAIL_FROM_NAME,
    )


def to_response(transfer_request) -> TransferRequestResponse:
    return TransferRequestResponse.model_validate(transfer_request)


@router.get("")
async def list_transfer_requests(
    status: Optional[str] = Query(None),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    service: TransferRequestService = Depends(get_transfer_request_service),
):
    result = service.list_requests(status, page, limit)
    return {
        "items": [to_response(r) for r in result["items"]],
        "pagination": result["pagination"],
    }


@router.get("/{request_id}")
async def get_transfer_request(
    request_id: int,
    service: TransferRequestService = Depends(get_transfer_request_service),
):
    return to_response(service.get_request(request_id))


@router.post("")
async def create_transfer_request(
    data: TransferRequestCreate,
    service: TransferRequestService = Depends(get_transfer_request_service),
):
    """Book a transfer; dispatchers are emailed when email is configured"""
    transfer_request = await service.create_request(data.model_dump())
    return {"success": True, "transferRequest": to_response(transfer_request)}


@router.put("")
async def update_transfer_request(
    data: TransferRequestUpdate,
    service: TransferRequestService = Depends(get_transfer_request_service),
):
    if not data.id:
        raise ValidationError("Request ID is required")

    transfer_request = service.update_request(data.id, data.model_dump(exclude_unset=True))
    return {"success": True, "transferRequest": to_response(transfer_request)}


@router.delete("")
async def delete_transfer_request(
    request_id: Optional[int] = Query(None, alias="id"),
    service: TransferRequestService = Depends(get_transfer_request_service),
):
    if not request_id:
        raise ValidationError("Request ID is required")

    service.delete_request(request_id)
    return {"success": True}
