"""
Pytest fixtures for API testing.
Runs the application against an in-memory SQLite database with the SMTP
gateway replaced by a recording fake.
"""

import os

# Must be set before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"
for _name in (
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_USER",
    "SMTP_PASSWORD",
    "CONTACT_FORM_EMAIL",
    "TRANSFER_REQUEST_EMAIL",
):
    os.environ[_name] = ""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from transfer_booking import config
from transfer_booking.database import Base, SessionLocal, engine
from transfer_booking.email_service import get_email_service
from transfer_booking.main import app
from transfer_booking.models import Vehicle

CONTACT_RECIPIENT = "office@example.com"
TRANSFER_RECIPIENT = "dispatch@example.com"


class FakeEmailService:
    """Stands in for EmailService and records every send attempt"""

    def __init__(self, configured: bool = True, result: bool = True, error: Optional[Exception] = None):
        self.configured = configured
        self.result = result
        self.error = error
        self.sent: list[dict] = []

    def is_configured(self) -> bool:
        return self.configured

    async def send_email(self, to, subject, text, html, reply_to=None) -> bool:
        self.sent.append(
            {"to": to, "subject": subject, "text": text, "html": html, "reply_to": reply_to}
        )
        if self.error:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh tables for every test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def email_gateway():
    return FakeEmailService()


@pytest.fixture
def client(email_gateway, monkeypatch):
    monkeypatch.setattr(config, "CONTACT_FORM_EMAIL", CONTACT_RECIPIENT)
    monkeypatch.setattr(config, "TRANSFER_REQUEST_EMAIL", TRANSFER_RECIPIENT)
    app.dependency_overrides[get_email_service] = lambda: email_gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def count_rows():
    """Count stored rows of a model using a short-lived session"""

    def _count(model) -> int:
        with SessionLocal() as db:
            return db.query(model).count()

    return _count


@pytest.fixture
def vehicle():
    with SessionLocal() as db:
        record = Vehicle(name="Mercedes-Benz V-Class", vehicle_class="minivan", passenger_capacity=7)
        db.add(record)
        db.commit()
        db.refresh(record)
        return {"id": record.id, "name": record.name}


@pytest.fixture
def contact_payload():
    return {"name": "Anna", "email": "anna@example.com", "message": "Do you have child seats?"}


@pytest.fixture
def transfer_payload():
    return {
        "customerName": "Ivan Petrov",
        "customerPhone": "+7 (912) 345-67-89",
        "date": "2026-11-03T09:30:00",
        "originCity": "Sochi",
        "originAddress": "Airport, Terminal A",
        "destinationCity": "Krasnaya Polyana",
        "destinationAddress": "Rosa Khutor, Hotel Park Inn",
        "vehicleClass": "business",
        "paymentMethod": "card",
    }
