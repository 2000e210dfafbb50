"""Contact request service - contact form submissions"""

from ...email_templates import Notification, contact_request_notification
from ...models import ContactRequest
from ...shared.validators import is_blank
from ..submissions.service import SubmissionService
from .repository import ContactRequestRepository


class ContactRequestService(SubmissionService):
    repo = ContactRequestRepository()
    required_fields = ("name", "email", "message")
    entity_label = "contact request"

    def prepare_create(self, data: dict) -> dict:
        phone = data.get("phone")
        return {
            "name": data["name"],
            "email": data["email"],
            "phone": None if is_blank(phone) else phone,
            "message": data["message"],
        }

    def prepare_update(self, entity: ContactRequest, data: dict) -> dict:
        updates = dict(data)
        if "phone" in updates and is_blank(updates["phone"]):
            updates["phone"] = None
        return updates

    def build_notification(self, entity: ContactRequest) -> Notification:
        return contact_request_notification(entity, self.site_name)
