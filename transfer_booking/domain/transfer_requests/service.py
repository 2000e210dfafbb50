"""Transfer request service - transfer bookings from the website"""

from ...email_templates import Notification, transfer_request_notification
from ...models import TransferRequest
from ...shared.validators import is_blank, parse_datetime
from ..submissions.service import SubmissionService
from .repository import TransferRequestRepository

OPTIONAL_TEXT_FIELDS = (
    "origin_city",
    "origin_address",
    "destination_city",
    "destination_address",
    "vehicle_class",
    "payment_method",
    "comments",
)
FLAG_FIELDS = ("return_transfer", "tell_driver")


class TransferRequestService(SubmissionService):
    repo = TransferRequestRepository()
    required_fields = ("customer_name", "customer_phone", "date")
    entity_label = "transfer request"

    def prepare_create(self, data: dict) -> dict:
        values = {
            "customer_name": data["customer_name"],
            "customer_phone": data["customer_phone"],
            "date": parse_datetime(data["date"]),
            "vehicle_id": data.get("vehicle_id"),
        }
        for name in OPTIONAL_TEXT_FIELDS:
            value = data.get(name)
            values[name] = None if is_blank(value) else value
        for name in FLAG_FIELDS:
            values[name] = bool(data.get(name))

        # A return date only means something for round trips
        values["return_date"] = parse_datetime(data.get("return_date")) if values["return_transfer"] else None
        return values

    def prepare_update(self, entity: TransferRequest, data: dict) -> dict:
        updates = dict(data)

        for name in ("date", "return_date"):
            if name in updates:
                updates[name] = parse_datetime(updates[name])

        for name in FLAG_FIELDS:
            if name in updates:
                updates[name] = bool(updates[name])
        for name in OPTIONAL_TEXT_FIELDS:
            if name in updates and is_blank(updates[name]):
                updates[name] = None

        if not updates.get("return_transfer", entity.return_transfer):
            updates["return_date"] = None
        return updates

    def build_notification(self, entity: TransferRequest) -> Notification:
        return transfer_request_notification(entity, self.site_name)
