"""HTTP error taxonomy shared by all request domains.

Every error is rendered by the application as ``{"error": <detail>}`` with the
matching status code. Notification failures are deliberately absent: they are
logged by the pipeline and never reach the caller.
"""

from typing import Optional

from fastapi import HTTPException


class RequestError(HTTPException):
    status_code = 500

    def __init__(self, message: str, request_id: Optional[int] = None):
        if request_id is not None:
            message = f"{message} (request ID: {request_id})"
        super().__init__(status_code=self.status_code, detail=message)
        self.request_id = request_id


class ValidationError(RequestError):
    """Required input missing or unreadable"""

    status_code = 400


class NotFoundError(RequestError):
    """Unknown id on fetch, update or delete"""

    status_code = 404


class ServerError(RequestError):
    """Store failure while handling the request"""

    status_code = 500
