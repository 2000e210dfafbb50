"""Transfer request repository - Database operations for transfer bookings"""

from sqlalchemy.orm import joinedload

from ...models import TransferRequest
from ..submissions.repository import RequestRepository


class TransferRequestRepository(RequestRepository):
    model = TransferRequest
    load_options = (joinedload(TransferRequest.vehicle),)
