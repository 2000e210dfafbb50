"""
Tests for staff notification rendering.
"""

from datetime import datetime

import pytest

from transfer_booking.email_templates import (
    NOT_SPECIFIED,
    contact_request_notification,
    format_datetime,
    payment_method_label,
    transfer_request_notification,
)
from transfer_booking.models import ContactRequest, TransferRequest, Vehicle


def make_transfer(**overrides) -> TransferRequest:
    fields = {
        "id": 17,
        "customer_name": "Ivan Petrov",
        "customer_phone": "+7 (912) 345-67-89",
        "date": datetime(2026, 11, 3, 9, 30),
        "return_transfer": False,
        "tell_driver": False,
        "origin_city": "Sochi",
        "destination_city": "Krasnaya Polyana",
        "destination_address": "Rosa Khutor",
        "payment_method": "cash",
    }
    fields.update(overrides)
    return TransferRequest(**fields)


class TestFormatting:
    def test_format_datetime(self):
        assert format_datetime(datetime(2026, 10, 17, 14, 5)) == "17 October 2026, 14:05"

    def test_format_missing_datetime(self):
        assert format_datetime(None) == NOT_SPECIFIED

    @pytest.mark.parametrize(
        "code,label",
        [
            ("cash", "Cash"),
            ("card", "Bank card"),
            ("online", "Online payment"),
            ("invoice", "invoice"),
            (None, NOT_SPECIFIED),
        ],
    )
    def test_payment_method_label(self, code, label):
        assert payment_method_label(code) == label


class TestContactNotification:
    def test_absent_phone_rendered_as_placeholder(self):
        request = ContactRequest(id=3, name="Anna", email="anna@example.com", message="Hello")

        notification = contact_request_notification(request, "Royal Transfer")

        assert "Phone: not specified" in notification.text
        assert "<strong>Phone:</strong> not specified" in notification.html
        assert notification.reply_to == "anna@example.com"
        assert notification.subject == "New contact request from Anna"

    def test_user_text_is_escaped_in_html(self):
        request = ContactRequest(
            id=3, name="<b>Anna</b>", email="anna@example.com", message="<script>alert(1)</script>"
        )

        notification = contact_request_notification(request, "Royal Transfer")

        assert "<script>" not in notification.html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in notification.html
        assert "<script>alert(1)</script>" in notification.text

    def test_links_in_html(self):
        request = ContactRequest(
            id=3, name="Anna", email="anna@example.com", phone="+7 (999) 123-45-67", message="Hi"
        )

        html = contact_request_notification(request, "Royal Transfer").html

        assert 'href="mailto:anna@example.com"' in html
        assert 'href="tel:+79991234567"' in html
        assert "<blockquote" in html


class TestTransferNotification:
    def test_destination_address_shown(self):
        notification = transfer_request_notification(make_transfer(), "Royal Transfer")

        assert "To address: Rosa Khutor" in notification.text
        assert "Payment method: Cash" in notification.text
        assert "Return transfer: No" in notification.text
        assert "Return date and time" not in notification.text

    def test_tell_driver_replaces_destination_address(self):
        notification = transfer_request_notification(make_transfer(tell_driver=True), "Royal Transfer")

        assert "Rosa Khutor" not in notification.text
        assert "Rosa Khutor" not in notification.html
        assert "<em>customer will tell the driver</em>" in notification.html

    def test_round_trip_without_return_date(self):
        notification = transfer_request_notification(
            make_transfer(return_transfer=True), "Royal Transfer"
        )

        assert "Return transfer: Yes" in notification.text
        assert "Return date and time: not specified" in notification.text

    def test_absent_fields_use_placeholder(self):
        notification = transfer_request_notification(make_transfer(), "Royal Transfer")

        assert "From address: not specified" in notification.text
        assert "Vehicle class: not specified" in notification.text
        assert "Vehicle: not specified" in notification.text

    def test_vehicle_name(self):
        request = make_transfer(vehicle=Vehicle(id=1, name="Mercedes-Benz V-Class"))

        notification = transfer_request_notification(request, "Royal Transfer")

        assert "Vehicle: Mercedes-Benz V-Class" in notification.text

    def test_text_and_html_share_rows(self):
        notification = transfer_request_notification(make_transfer(comments="Child seat please"), "Royal Transfer")

        for value in ("Booking ID: 17", "Child seat please", "3 November 2026, 09:30", "Sochi"):
            assert value.split(": ")[-1] in notification.text
            assert value.split(": ")[-1] in notification.html
