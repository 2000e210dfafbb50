"""Submission service - validate, persist, notify pipeline for request forms"""

import logging
import math
from datetime import datetime
from typing import Optional

from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...email_service import EmailService
from ...email_templates import Notification
from ...shared.errors import NotFoundError, ServerError, ValidationError
from ...shared.validators import is_blank, missing_fields
from .repository import RequestRepository

logger = logging.getLogger(__name__)

NEW_STATUS = "new"

# Listing bounds; keeps the offset inside a 64-bit integer
MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 100

# Outcomes of the notification step
SENT = "sent"
FAILED = "failed"
SKIPPED = "skipped"


class SubmissionService:
    """
    Base service for one kind of public request.

    A create commits the entity first and only then attempts the staff email.
    The email step runs inside its own catch-and-log boundary: whatever happens
    there, the committed entity is returned to the caller.
    """

    repo: RequestRepository = RequestRepository()
    required_fields: tuple = ()
    entity_label = "request"

    def __init__(
        self,
        db: Session,
        email_service: EmailService,
        recipient: Optional[str] = None,
        site_name: str = "Royal Transfer",
    ):
        self.db = db
        self.email_service = email_service
        self.recipient = recipient
        self.site_name = site_name

    # ------------------------------------------------------------------
    # Hooks for concrete request kinds
    # ------------------------------------------------------------------

    def prepare_create(self, data: dict) -> dict:
        """Column values for a new entity; raise ValueError for unreadable input"""
        raise NotImplementedError

    def prepare_update(self, entity, data: dict) -> dict:
        return dict(data)

    def build_notification(self, entity) -> Notification:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_requests(self, status: Optional[str] = None, page: int = 1, limit: int = 10) -> dict:
        """Get one page of requests, newest first"""
        offset = (page - 1) * limit
        try:
            total = self.repo.count(self.db, status)
            items = self.repo.find_page(self.db, status, offset, limit)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error fetching {self.entity_label}s: {e}")
            raise ServerError(f"Failed to fetch {self.entity_label}s") from e

        return {
            "items": items,
            "pagination": {
                "total": total,
                "page": page,
                "limit": limit,
                "pages": math.ceil(total / limit),
            },
        }

    def get_request(self, request_id: int):
        try:
            entity = self.repo.find_by_id(self.db, request_id)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error fetching {self.entity_label} {request_id}: {e}")
            raise ServerError(f"Failed to fetch {self.entity_label}", request_id) from e

        if not entity:
            raise NotFoundError(f"{self.entity_label.capitalize()} not found", request_id)
        return entity

    async def create_request(self, data: dict):
        """Validate, persist, notify staff. Returns the persisted entity."""
        missing = missing_fields(data, self.required_fields)
        if missing:
            names = ", ".join(to_camel(name) for name in missing)
            raise ValidationError(f"Required fields are missing: {names}")

        try:
            values = self.prepare_create(data)
        except ValueError as e:
            logger.error(f"❌ Error creating {self.entity_label}: {e}")
            raise ServerError(str(e)) from e

        now = datetime.utcnow()
        values.update(status=NEW_STATUS, created_at=now, updated_at=now)

        try:
            entity = self.repo.create(self.db, **values)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error creating {self.entity_label}: {e}")
            raise ServerError(f"Failed to create {self.entity_label}: {e}") from e

        logger.info(f"✅ {self.entity_label.capitalize()} {entity.id} saved to the database")

        await self.notify(entity)
        return entity

    async def notify(self, entity) -> str:
        """Best-effort staff email for a committed entity; never raises"""
        if not (self.email_service.is_configured() and self.recipient):
            logger.warning(
                f"⚠️ Email service not configured or no recipient set, "
                f"skipping notification for {self.entity_label} {entity.id}"
            )
            return SKIPPED

        try:
            notification = self.build_notification(entity)
            sent = await self.email_service.send_email(
                to=self.recipient,
                subject=notification.subject,
                text=notification.text,
                html=notification.html,
                reply_to=notification.reply_to,
            )
        except Exception as e:
            logger.error(f"❌ Notification for {self.entity_label} {entity.id} failed: {e}")
            return FAILED

        if not sent:
            logger.error(f"❌ Email notification for {self.entity_label} {entity.id} was not sent")
            return FAILED

        logger.info(f"📧 Email notification for {self.entity_label} {entity.id} sent")
        return SENT

    def update_request(self, request_id: int, data: dict):
        """Merge the provided fields over the stored entity"""
        entity = self.get_request(request_id)

        data = {key: value for key, value in data.items() if key != "id"}
        blank = [
            name
            for name in (*self.required_fields, "status")
            if name in data and is_blank(data[name])
        ]
        if blank:
            names = ", ".join(to_camel(name) for name in blank)
            raise ValidationError(f"Fields cannot be empty: {names}", request_id)

        try:
            updates = self.prepare_update(entity, data)
        except ValueError as e:
            raise ServerError(str(e), request_id) from e
        updates["updated_at"] = datetime.utcnow()

        try:
            entity = self.repo.update(self.db, entity, **updates)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error updating {self.entity_label} {request_id}: {e}")
            raise ServerError(f"Failed to update {self.entity_label}", request_id) from e

        logger.info(f"✅ {self.entity_label.capitalize()} {request_id} updated")
        return entity

    def delete_request(self, request_id: int) -> None:
        entity = self.get_request(request_id)

        try:
            self.repo.delete(self.db, entity)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Error deleting {self.entity_label} {request_id}: {e}")
            raise ServerError(f"Failed to delete {self.entity_label}", request_id) from e

        logger.info(f"🗑️ {self.entity_label.capitalize()} {request_id} deleted")
