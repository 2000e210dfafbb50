"""Contact request repository - Database operations for contact form submissions"""

from ...models import ContactRequest
from ..submissions.repository import RequestRepository


class ContactRequestRepository(RequestRepository):
    model = ContactRequest
