"""
Staff notification templates
Plain-text and HTML bodies are rendered from the same list of sections so the
two variants can never disagree.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .models import ContactRequest, TransferRequest
from .utils.sanitization import phone_href, sanitize_string

NOT_SPECIFIED = "not specified"
TELL_DRIVER_NOTE = "customer will tell the driver"

# Fixed so rendering does not depend on the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

PAYMENT_METHODS = {
    "cash": "Cash",
    "card": "Bank card",
    "online": "Online payment",
}

QUOTE_STYLE = (
    "margin: 10px 0; padding: 10px; border-left: 4px solid #ccc; "
    "background-color: #f9f9f9; white-space: pre-wrap;"
)

# Row kinds
TEXT = "text"
PHONE = "phone"
EMAIL = "email"
QUOTE = "quote"
NOTE = "note"


@dataclass
class Row:
    label: str
    value: Optional[str]
    kind: str = TEXT


@dataclass
class Section:
    rows: list[Row]
    heading: Optional[str] = None


@dataclass
class Notification:
    subject: str
    text: str
    html: str
    reply_to: Optional[str] = None


def format_datetime(value: Optional[datetime]) -> str:
    """Render a timestamp as e.g. '17 October 2026, 14:30'"""
    if value is None:
        return NOT_SPECIFIED
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}, {value:%H:%M}"


def payment_method_label(code: Optional[str]) -> str:
    if not code:
        return NOT_SPECIFIED
    return PAYMENT_METHODS.get(code, code)


def _text_row(row: Row) -> str:
    value = row.value if row.value else NOT_SPECIFIED
    if row.kind == QUOTE:
        return f"{row.label}:\n{value}"
    return f"{row.label}: {value}"


def _html_row(row: Row) -> str:
    label = sanitize_string(row.label)
    if not row.value:
        return f"<p><strong>{label}:</strong> {NOT_SPECIFIED}</p>"

    value = sanitize_string(row.value)
    if row.kind == PHONE:
        value = f'<a href="{sanitize_string(phone_href(row.value))}">{value}</a>'
    elif row.kind == EMAIL:
        value = f'<a href="mailto:{value}">{value}</a>'
    elif row.kind == NOTE:
        value = f"<em>{value}</em>"
    elif row.kind == QUOTE:
        return (
            f"<p><strong>{label}:</strong></p>\n"
            f'<blockquote style="{QUOTE_STYLE}">{value}</blockquote>'
        )
    return f"<p><strong>{label}:</strong> {value}</p>"


def render_text(intro: str, sections: list[Section]) -> str:
    blocks = [intro]
    for section in sections:
        lines = [f"{section.heading}:"] if section.heading else []
        lines.extend(_text_row(row) for row in section.rows)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_html(title: str, sections: list[Section], footer: str) -> str:
    parts = [f"<h2>{sanitize_string(title)}</h2>"]
    for section in sections:
        if section.heading:
            parts.append(f"<h3>{sanitize_string(section.heading)}:</h3>")
        parts.extend(_html_row(row) for row in section.rows)
    parts.append("<hr>")
    parts.append(f"<p><small>{sanitize_string(footer)}</small></p>")
    return "\n".join(parts)


def contact_request_notification(request: ContactRequest, site_name: str) -> Notification:
    """Staff email announcing a new contact form submission"""
    sections = [
        Section(
            rows=[
                Row("Request ID", str(request.id)),
                Row("Name", request.name),
                Row("Email", request.email, EMAIL),
                Row("Phone", request.phone, PHONE),
                Row("Received", format_datetime(request.created_at)),
                Row("Message", request.message, QUOTE),
            ]
        )
    ]
    return Notification(
        subject=f"New contact request from {request.name}",
        text=render_text(f"New contact request from the {site_name} website:", sections),
        html=render_html(
            f"New contact request from the {site_name} website",
            sections,
            "This is an automatic notification. The request has been saved to the database.",
        ),
        reply_to=request.email,
    )


def transfer_request_notification(request: TransferRequest, site_name: str) -> Notification:
    """Staff email announcing a new transfer booking"""
    if request.tell_driver:
        destination_address = Row("To address", TELL_DRIVER_NOTE, NOTE)
    else:
        destination_address = Row("To address", request.destination_address)

    transfer_rows = [
        Row("From city", request.origin_city),
        Row("From address", request.origin_address),
        Row("To city", request.destination_city),
        destination_address,
        Row("Date and time", format_datetime(request.date)),
        Row("Vehicle class", request.vehicle_class),
        Row("Vehicle", request.vehicle.name if request.vehicle else None),
        Row("Payment method", payment_method_label(request.payment_method)),
        Row("Return transfer", "Yes" if request.return_transfer else "No"),
    ]
    if request.return_transfer:
        transfer_rows.append(Row("Return date and time", format_datetime(request.return_date)))
    transfer_rows.append(Row("Comments", request.comments, QUOTE))

    sections = [
        Section(rows=[Row("Booking ID", str(request.id))]),
        Section(
            heading="Customer",
            rows=[
                Row("Name", request.customer_name),
                Row("Phone", request.customer_phone, PHONE),
            ],
        ),
        Section(heading="Transfer", rows=transfer_rows),
    ]
    return Notification(
        subject=f"New transfer booking #{request.id} from {request.customer_name}",
        text=render_text(f"New transfer booking from the {site_name} website:", sections),
        html=render_html(
            f"New transfer booking from the {site_name} website",
            sections,
            "This is an automatic notification. The booking has been saved to the database.",
        ),
    )
